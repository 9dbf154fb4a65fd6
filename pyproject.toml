[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ftxpm"
version = "0.1.0"
description = "An XPM image parser with small string, memory, list and line utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["xpm", "image", "parser", "x11", "colors", "strings", "utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Multimedia :: Graphics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ftxpm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
