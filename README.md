# ftkit

Small helpers for ASCII characters, byte buffers, NUL-terminated strings,
32-bit number conversion, writing to file descriptors, and a singly linked
list. All of it is written in plain Python. There are no runtime dependencies,
and it needs Python 3.10 or later.

## Modules

| Module             | Contents |
|--------------------|----------|
| `ftkit.ctype`      | `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower` |
| `ftkit.memory`     | `memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp`, `calloc` |
| `ftkit.strings`    | `strlen`, `strlcpy`, `strlcat`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `strdup` |
| `ftkit.convert`    | `atoi`, `itoa` |
| `ftkit.transform`  | `substr`, `strjoin`, `strtrim`, `split`, `strmapi`, `striteri` |
| `ftkit.output`     | `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd` |
| `ftkit.linkedlist` | `Node`, `LinkedList` |

### Characters: `ftkit.ctype`

Each function takes an integer code or a one-character string. Only ASCII
counts: `is_alpha` tests for letters, `is_digit` for `0`–`9`, `is_ascii` for the
range 0..127, and `is_print` for space through `~`. `to_upper` and `to_lower`
change only ASCII letters and return the same type they were given.

```python
from ftkit.ctype import is_alpha, to_upper

is_alpha("q")        # True
to_upper("a")        # "A"
to_upper(ord("a"))   # 65
```

### Byte buffers: `ftkit.memory`

These functions work on `bytearray` (and `bytes` where they only read). A
negative count, or one larger than a buffer, raises `ValueError`.

- `memset(buffer, value, n)` fills the first `n` bytes with `value & 0xFF` and
  returns the buffer. `bzero(buffer, n)` fills them with zeros.
- `memcpy(dest, src, n)` copies `n` bytes to the start of `dest`.
- `memmove(dest, dest_offset, src_offset, n)` copies `n` bytes within one
  buffer. The two regions may overlap.
- `memchr(data, value, n)` returns the index of the first match, or `None`.
- `memcmp(a, b, n)` returns the difference of the first differing bytes, or 0.
- `calloc(nmemb, size)` returns a zero-filled `bytearray`. It raises
  `MemoryError` when the total size would overflow a machine size.

```python
from ftkit.memory import memset, memmove, memcmp

buf = bytearray(b"abcdef")
memset(buf, ord("z"), 2)    # bytearray(b'zzcdef')
memmove(buf, 2, 0, 4)       # bytearray(b'zzzzcd')
memcmp(b"abc", b"abd", 3)   # -1
```

### NUL-terminated strings: `ftkit.strings`

These functions accept `str`, `bytes` or `bytearray`. Each text ends at its
first NUL, or at the end of the object if it has none. Searches return an index
rather than a pointer, and `None` when nothing is found.

- `strlcpy` and `strlcat` write into a `bytearray`. Both return the length of
  the string they tried to create.
- `strchr` and `strrchr` return the index of the terminator when you search
  for NUL.
- `strnstr(big, little, length)` finds `little` only if the whole match lies
  within the first `length` characters. An empty `little` is found at index 0.

```python
from ftkit.strings import strlcpy, strncmp, strnstr

dst = bytearray(8)
strlcpy(dst, b"hello world", 8)   # 11; dst holds b"hello w\0"
strncmp("abc", "abd", 2)          # 0
strnstr("foo bar", "bar", 7)      # 4
strnstr("foo bar", "bar", 6)      # None
```

### Numbers: `ftkit.convert`

`atoi` first skips leading spaces and the characters tab through carriage
return. It then reads one optional sign and the ASCII digits that follow.
Input with no digits gives 0, and results outside the 32-bit range wrap around.

`itoa` returns the decimal text of a 32-bit signed integer. It raises
`OverflowError` for values outside that range and `TypeError` for values that
are not integers.

```python
from ftkit.convert import atoi, itoa

atoi("   -42abc")        # -42
atoi("2147483648")       # -2147483648
itoa(-2147483648)        # "-2147483648"
```

### Building strings: `ftkit.transform`

- `substr(s, start, length)` returns a slice. It is empty when `start` is past
  the end.
- `strjoin(s1, s2)` concatenates two strings.
- `strtrim(s, charset)` strips the characters of `charset` from both ends.
- `split(s, sep)` splits on one character and drops empty pieces.
- `strmapi(s, func)` builds a new string from `func(index, char)`. For byte
  strings, `func` receives and returns byte values.
- `striteri(chars, func)` replaces each element of a `bytearray` or a list of
  characters, in place, up to the first NUL.

```python
from ftkit.transform import split, strtrim, strmapi

split(",,Hello,World,,", ",")                 # ["Hello", "World"]
strtrim("xxhixx", "x")                        # "hi"
strmapi("abc", lambda i, c: c.upper() if i == 1 else c)   # "aBc"
```

### File-descriptor output: `ftkit.output`

These functions write straight to an open file descriptor with `os.write`.

- `putchar_fd` writes one character. An integer is written as a single byte.
- `putstr_fd` writes a string. Passing `None` writes nothing.
- `putendl_fd` writes a string followed by a newline.
- `putnbr_fd` writes the decimal form of a 32-bit integer.

`str` values are encoded as UTF-8.

```python
import sys
from ftkit.output import putnbr_fd, putendl_fd

putnbr_fd(-123, sys.stdout.fileno())
putendl_fd("", sys.stdout.fileno())
```

### Linked list: `ftkit.linkedlist`

`LinkedList` is a singly linked list made of `Node` objects. Each `Node` has a
`content` and a `next`. The list offers:

- `len()` and iteration over its contents
- `add_front` and `add_back`, which return the new node
- `last()`, which returns the last node or `None`
- `delete_first(delete)` and `clear(delete)`, which pass each removed content
  to the optional `delete` callback
- `for_each(func)`
- `map(func, delete)`, which returns a new list. If `func` raises, the contents
  already produced are passed to `delete` and the exception propagates.

```python
from ftkit.linkedlist import LinkedList

items = LinkedList([1, 2, 3])
items.add_front(0)
items.add_back(4)
len(items)                                 # 5
list(items.map(lambda x: x * 10))          # [0, 10, 20, 30, 40]
```

## What it does not include

`ftkit` is a library only. It has no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```