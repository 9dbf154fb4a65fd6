# ftxpm

A small pure-Python library with two parts:

* **XPM images**: decode XPM pixmaps from a file, from the text of a file or
  from the list of XPM strings, with colours given as hexadecimal `#rrggbb`
  values or as X11 colour names.
* **Utilities**: string helpers, ASCII character classes, byte-buffer helpers,
  a linked list, output helpers and line-by-line reading.

It needs nothing beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## XPM images

```python
from ftxpm.xpm import load_xpm, parse_xpm_lines, parse_xpm_text, XpmError

image = load_xpm("wall.xpm")
print(image.width, image.height)
print(hex(image.pixels[0][0]))   # pixels[y][x], unsigned 0xAARRGGBB

image = parse_xpm_lines([
    "2 1 2 1",
    "a c #ff0000",
    "b c blue",
    "ab",
])
# image.pixels == ((0xFF0000, 0xFF),)
```

* `parse_xpm_lines(lines)` takes the XPM strings in order: the header
  (`width height colours chars-per-pixel`), one line per colour, then one
  line per pixel row.
* `parse_xpm_text(text)` takes the contents of an XPM file. C and C++
  comments outside quoted strings are removed first (`strip_comments`), then
  the quoted strings are parsed as above.
* `load_xpm(path)` reads a file and parses its text.

Each returns an `XpmImage`, a frozen dataclass with `width`, `height` and
`pixels`. Malformed data (a bad header, a missing colour or pixel row, a
colour line without `c`, a row too short) raises `XpmError`, a subclass of
`ValueError`. A file that cannot be opened raises the usual `OSError`.

Colour handling:

* `text_to_rgb(name, end=None)` gives the value of a colour specification.
  `#` introduces a hexadecimal value; otherwise the name (joined with `end`
  by a space when given, as for two-word names) is looked up without regard
  to case. Unknown names give 0 and `None` gives -1.
* Pixels whose colour is `None` become `TRANSPARENT` (`0xFF000000`).
  Pixel keys not defined among the colours become 0.

The colour table itself is in `ftxpm.colors`:

```python
from ftxpm.colors import COLORS, NONE_COLOR, color_by_name

color_by_name("Light Goldenrod")   # 0xFAFAD2, the first entry of that name
color_by_name("none")              # NONE_COLOR, i.e. -1
color_by_name("no such colour")    # None
```

`ftxpm.wordtab` has the search and splitting helpers the parser uses:
`find(text, needle, length)`, `find_unquoted(text, needle, length)` (skips
matches inside double quotes) and `split_words(text)` (splits on spaces and
tabs).

## Utilities

```python
from ftxpm.strings import atoi, itoa, split, strtrim, substr, strnstr
from ftxpm.chars import to_upper, is_digit, lowercase
from ftxpm.memory import calloc, strlcpy
from ftxpm.linked import LinkedList
from ftxpm.output import put_endl, put_nbr
from ftxpm.lines import iter_lines

atoi("  -0042abc")          # -42
itoa(-7)                    # "-7"
split("a,,b,c", ",")        # ["a", "b", "c"]
strtrim("xxhixx", "x")      # "hi"
substr("hello", 1, 3)       # "ell"
strnstr("hello", "ll", 4)   # 2
to_upper("a")               # "A"
lowercase("MiXeD")          # "mixed"

buf = calloc(8, 1)          # bytearray of 8 zero bytes
strlcpy(buf, b"hello", 4)   # 5; buf starts with b"hel\0"

items = LinkedList([1, 2])
items.push_front(0)
doubled = items.map(lambda v: v * 2)
list(doubled)               # [0, 2, 4]

put_nbr(42)                 # writes "42" to standard output

with open("notes.txt") as fh:
    for line in iter_lines(fh):
        ...
```

The modules are:

* `ftxpm.strings`: `atoi`, `itoa`, `split`, `strtrim`, `substr`, `strnstr`,
  `strncmp`, `strchr`, `strrchr`, `strmapi`, `striteri`
* `ftxpm.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `to_lower`, `to_upper`, `lowercase`
* `ftxpm.memory`: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`,
  `memmove`, `strlcpy`, `strlcat`, working on `bytearray` or `memoryview`
  buffers in place
* `ftxpm.linked`: `LinkedList` with `push_front`, `push_back`, `last`,
  `clear`, `for_each`, `map`, `len()` and iteration
* `ftxpm.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`, writing to a
  given stream or to standard output
* `ftxpm.lines`: `get_next_line` and `iter_lines`
* `ftxpm.colors`: the X11 colour-name table
* `ftxpm.wordtab`: substring search and word splitting
* `ftxpm.xpm`: the XPM parser

## What it does not do

The package only decodes XPM images into pixel values. It does not open
windows, display or draw images, write XPM files or read other image
formats, and it provides no command-line program.