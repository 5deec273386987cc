# duckgame

The helper library for a small tile-based puzzle game. It lives in the
`duckgame.ft` sub-package and covers character classification, byte buffers,
C-style string operations, number/text conversion, writing to streams, a
singly linked list and a small `printf`. It uses only the standard library.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## What is in it

### `duckgame.ft.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`,
`to_lower`. Each takes an integer character code or a one-character string.
The predicates return `bool` and look only at ASCII ranges; the conversions
return the same kind of value they were given.

```python
from duckgame.ft.chars import is_alnum, to_upper

is_alnum("7")     # True
to_upper("q")     # "Q"
to_upper(97)      # 65
```

### `duckgame.ft.memory`

Operations on `bytearray`/`bytes` buffers:

- `memset(buf, value, length)` fills the first `length` bytes with
  `value & 0xFF` and returns `buf`; `bzero(buf, length)` zeroes them.
- `calloc(count, size)` returns a zero-filled `bytearray` of `count * size`.
- `memcpy(dst, src, n)` copies `n` bytes and returns `dst` (or `None` when
  both are `None`).
- `memmove(buf, dst_offset, src_offset, n)` copies within one buffer; the
  regions may overlap.
- `memchr(data, value, n)` gives the index of the first matching byte or
  `None`.
- `memcmp(a, b, n)` gives the difference of the first differing bytes, or 0.

Lengths that are negative or run past a buffer raise `ValueError`.

### `duckgame.ft.strings`

Searches return an index, or `None` when nothing is found:

- `strchr(s, c)`, `strrchr(s, c)` — first/last occurrence; searching for
  `"\0"` returns `len(s)`.
- `strnstr(haystack, needle, length)` — needle lying within the first
  `length` characters; an empty needle is found at 0.
- `strncmp(s1, s2, n)` — difference of the first differing character codes.

Bounded copies return the resulting text together with the length the full
result would need:

- `strlcpy(src, dstsize)` → `(copied_text, len(src))`
- `strlcat(dst, src, dstsize)` → `(joined_text, needed_length)`

Other helpers: `substr(s, start, length)`, `strjoin(s1, s2)`,
`strtrim(s, charset)`, `split(s, sep)` (drops empty pieces),
`strmapi(s, func)` (builds a new string from `func(index, char)`) and
`striteri(s, func)` (calls `func(index, char)` over a mutable sequence of
characters, replacing a character when `func` returns something other than
`None`).

```python
from duckgame.ft.strings import split, strlcpy

split("1111\n1P0C\n\n1E01\n", "\n")   # ["1111", "1P0C", "1E01"]
strlcpy("hello", 3)                   # ("he", 5)
```

### `duckgame.ft.convert`

- `atoi(text)` skips leading whitespace, takes one optional sign and then
  digits up to the first non-digit; no digits gives 0.
- `itoa(n)` renders an integer in decimal.

### `duckgame.ft.fdio`

`put_char(c, stream)`, `put_str(s, stream)`, `put_endl(s, stream)` and
`put_nbr(n, stream)` write to a text stream; the stream defaults to
standard output.

### `duckgame.ft.lists`

`LinkedList` is a singly linked list of `Node` objects (`content`, `next`).
It can be built from any iterable and supports `push_front`, `push_back`
(both return the new node), `last()`, `len()`, iteration over contents,
`clear(delete)`, `for_each(func)` and `map(func, delete)`. When `func`
raises during `map`, the contents produced so far are passed to `delete` and
the exception propagates.

```python
from duckgame.ft.lists import LinkedList

items = LinkedList([1, 2, 3])
items.push_front(0)
list(items.map(lambda x: x * 10))   # [0, 10, 20, 30]
```

### `duckgame.ft.printf`

`format_string(template, *args)` and `printf(template, *args, stream=None)`
support the conversions `%c %s %p %d %i %u %x %X %%`. `%d`/`%i` wrap to a
signed 32-bit value, `%u`/`%x`/`%X` to an unsigned 32-bit value, and `%p`
prints `0x` followed by lowercase hex. A `None` string prints as `(null)`,
an unknown conversion prints nothing and a trailing lone `%` is dropped.
`printf` returns the number of characters written.

```python
from duckgame.ft.printf import format_string

format_string("moves: %d", 12)   # "moves: 12"
format_string("%x|%u", -1, -1)   # "ffffffff|4294967295"
```

## What it does not do

The package does not contain the game itself. It does not read or check
map files, has no player, move or victory logic, opens no window, draws no
images and provides no command to start a game. It offers only the helper
functions and classes listed above.