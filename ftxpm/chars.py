"""ASCII character classification and case conversion."""

from __future__ import annotations

from typing import Optional, TypeVar

__all__ = [
    "lowercase",
    "is_alpha",
    "is_digit",
    "is_alnum",
    "is_ascii",
    "is_print",
    "to_lower",
    "to_upper",
]

_Char = TypeVar("_Char", int, str)

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return c


def is_alpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def to_lower(c: _Char) -> _Char:
    """Lower an ASCII upper-case letter; anything else is returned unchanged.

    Takes and returns either a character code or a one-character string.
    """
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code


def to_upper(c: _Char) -> _Char:
    """Raise an ASCII lower-case letter; anything else is returned unchanged.

    Takes and returns either a character code or a one-character string.
    """
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code


def lowercase(text: Optional[str]) -> Optional[str]:
    """Lower every ASCII letter of ``text``.

    An empty or missing text gives None.
    """
    if not text:
        return None
    return "".join(to_lower(char) for char in text)