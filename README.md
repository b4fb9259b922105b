# ftkit

A small toolkit of low-level helpers with C-style semantics: character
classification, integer parsing and formatting, byte-buffer operations,
string operations, a singly linked list, a minimal `printf`, and a line
reader for file descriptors. It has no dependencies outside the standard
library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `ftkit.chars`

Character tests and case mapping follow plain ASCII rules. Each function
takes an integer code or a one-character string.

```python
from ftkit.chars import is_alpha, to_upper, atoi, itoa

is_alpha("a")           # True
to_upper(ord("q"))      # 81 (an int in, an int out)
to_upper("q")           # "Q" (a str in, a str out)
atoi("   -42abc")       # -42
itoa(-123)              # "-123"
```

`atoi` skips leading whitespace, accepts one sign and reads digits up to the
first non-digit; text without digits gives 0 and the result wraps like a
32-bit int. `itoa` raises `OverflowError` for values outside the 32-bit
range. Also available: `is_alnum`, `is_ascii`, `is_digit`, `is_print`,
`to_lower`.

### `ftkit.memory`

Operations on `bytes`, `bytearray` and `memoryview` objects. Functions that
write take a mutable buffer and return it; a length reaching past the end of
a buffer raises `ValueError`.

- `memset(buffer, value, length)`, `bzero(buffer, length)`
- `memcpy(dest, src, length)`
- `memmove(buffer, dest_offset, src_offset, length)`: copy within one
  buffer; the regions may overlap
- `memchr(data, value, length)`: index of the first matching byte, or `None`
- `memcmp(first, second, length)`: difference of the first unequal bytes, or 0
- `calloc(count, size)`: a zero-filled `bytearray`

### `ftkit.strings`

String helpers on ordinary Python strings. Searches return indexes, or
`None` when nothing is found; searching for code 0 finds `len(text)`.

```python
from ftkit.strings import split, strtrim, strlcpy, strchr

split("a,,b,", ",")     # ["a", "b"]: empty pieces are dropped
strtrim("xxhixx", "x")  # "hi"
strlcpy("hello", 3)     # ("he", 5): copied text and full source length
strchr("hello", "l")    # 2
```

Also available: `strlen`, `strncmp`, `strlcat` (returns the text and the
length the full concatenation would have had), `strnstr`, `strrchr`,
`strdup`, `substr`, `strjoin`, `strmapi(text, func)` with
`func(index, char)`, and `striteri(buffer, func)`, which replaces an item of
a mutable sequence wherever `func(index, item)` returns something other
than `None`.

### `ftkit.linkedlist`

`LinkedList` is a singly linked list of `Node` objects (`content`, `next`).
It supports `len()` and iteration over its contents, and offers
`push_front`, `push_back`, `head`, `last`, `clear(delete=None)`,
`each(func)` and `map(func, delete=None)`.

```python
from ftkit.linkedlist import LinkedList

items = LinkedList([1, 2, 3])
items.push_back(4)
len(items)                      # 4
list(items.map(lambda x: x * 2))  # [2, 4, 6, 8]
```

If the function given to `map` raises, the contents already produced are
passed to `delete` and the error propagates.

### `ftkit.output`

`put_char`, `put_str`, `put_endl` and `put_nbr` write to a target that is
either an integer file descriptor (written as UTF-8) or any object with a
`write` method. The target defaults to standard output.

### `ftkit.printf`

A minimal formatter with the conversions `%c`, `%s`, `%d`, `%i`, `%u`, `%x`,
`%X`, `%p` and `%%`; there are no flags, widths or precisions. Integers are
reduced as a C `int`, `unsigned int` or pointer would hold them, and a
`None` string prints as `(null)`.

```python
from ftkit.printf import render, printf

render("%s is %d (%x)", "answer", 42, 42)  # "answer is 42 (2a)"
render("%u", -1)                           # "4294967295"
printf("%c%c\n", "o", "k")                 # writes "ok\n", returns 3
```

`render` raises `TypeError` for missing arguments and `ValueError` for an
unknown or incomplete conversion; extra arguments are ignored. `printf`
takes an optional `stream` keyword (file descriptor or writable object).
The helpers `pointer_hex`, `unsigned_decimal`, `hex_lower` and `hex_upper`
are exposed as well.

### `ftkit.lines`

`LineReader(buffer_size=1, max_files=700)` reads lines as `bytes`, reading
`buffer_size` bytes per call and keeping unread data per descriptor. A
descriptor is an integer file descriptor below `max_files` or any object
with a `read(size)` method. `read_line` returns the next line with its
newline, or `None` at the end; `lines` yields every remaining line.
`get_next_line(fd)` uses a shared default reader.

```python
import os
from ftkit.lines import LineReader

reader = LineReader(buffer_size=64)
fd = os.open("notes.txt", os.O_RDONLY)
for line in reader.lines(fd):
    print(line.decode(), end="")
os.close(fd)
```

### `ftkit.talk`

Two command-line entry points.

```
ftkit-server
```

prints `Server PID: <pid>` and exits.

```
ftkit-client <pid> <message>
```

prints `Info sent: <n>`, where `<n>` is the byte length of the message. With
a wrong number of arguments or an empty message it prints nothing and exits
with status 1.

## What it does not do

The client and server do not talk to each other: the server does not wait
for messages and the client does not deliver anything to the given process.
They only print the lines described above.