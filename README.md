# ftlib

A collection of small, dependency-free helpers:

- `ftlib.chars`: ASCII character tests and case conversion (`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`). Each accepts an integer code point or a one-character string.
- `ftlib.memory`: byte-buffer operations on `bytearray`s (`memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp`, `calloc`).
- `ftlib.strings`: bounded string copy and search, comparison and number conversion (`strlcpy`, `strlcat`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `atoi`, `itoa`). Searches return an index or `None`.
- `ftlib.transforms`: substrings, joining, trimming, splitting and per-character mapping (`substr`, `strjoin`, `strtrim`, `split`, `strmapi`, `striteri`).
- `ftlib.output`: writing characters, strings and numbers to a text stream, standard output by default (`put_char`, `put_str`, `put_endl`, `put_nbr`).
- `ftlib.linked_list`: `LinkedList` with `push_front`, `push_back`, `last`, `clear`, `for_each` and `map`, plus `len()` and iteration.
- `ftlib.printf`: `printf` supporting `%c %s %p %d %i %u %x %X %%`; `format_printf` returns the text instead of writing it, and `format_hex`, `format_uint` and `format_pointer` format single values.
- `ftlib.pixels`: `Texture`, a buffer of four-byte RGBA pixels with `put_pixel` and `get_pixel`, and `draw_pixel` for writing a packed colour into any byte buffer.
- `ftlib.render_queue`: `Instance` and `DrawCall` records, `sort_render_queue` to order calls by depth, and `remove_image_calls` to drop every call for one image.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from ftlib.strings import atoi, itoa
from ftlib.transforms import split, strtrim
from ftlib.printf import format_printf

atoi("   -42abc")              # -42
itoa(-2147483648)              # "-2147483648"
split("  hello  world ", " ")  # ["hello", "world"]
strtrim("xxhixx", "x")         # "hi"
format_printf("%d in hex is %x", 255, 255)  # "255 in hex is ff"
```

Pixels and draw order:

```python
from types import SimpleNamespace

from ftlib.pixels import Texture
from ftlib.render_queue import DrawCall, Instance, sort_render_queue

texture = Texture(2, 2)
texture.put_pixel(1, 0, 0xFF0000FF)
texture.get_pixel(1, 0)        # 0xFF0000FF

image = SimpleNamespace(instances=[Instance(0, 0, z=3), Instance(5, 5, z=1)])
queue = [DrawCall(image, 0), DrawCall(image, 1)]
sort_render_queue(queue)       # calls now ordered by depth: instance 1, then 0
```

## What it does not do

- It opens no window and draws nothing on screen: `Texture` and `DrawCall` only hold pixel data and draw order for you to use.
- It does not read or decode image files; a `Texture` starts zero-filled or from pixel bytes you supply.
- It has no line-by-line reader for files or streams, and no command-line program.