# ftkit

A small library of ASCII character, byte-buffer and string helpers, together
with a minimal `printf`-style formatter and a line reader that works through a
fixed-size read buffer. It has no dependencies outside the standard library.

## Installation

```
pip install ftkit
```

## Modules

### `ftkit.chars`

ASCII classification and case mapping. Each function accepts an integer code
point or a one-character string; anything else raises `TypeError`.

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print` return `bool`.
  `is_print` counts the space as printable.
- `to_lower` and `to_upper` change only ASCII letters and return a value of
  the same kind they were given (`to_upper("a") == "A"`, `to_upper(97) == 65`).

### `ftkit.memory`

Operations on byte buffers. Functions that modify a buffer need a writable one
(a `bytearray` or a writable `memoryview`). A count that runs past the end of a
buffer raises `ValueError`; a negative count raises `ValueError`.

- `bzero(buf, n)`, `memset(buf, value, n)` (fills with `value & 0xFF`).
- `calloc(num, size)` returns a zeroed `bytearray`, raising `OverflowError`
  when the total size is too large.
- `memchr(buf, value, n)` returns an index or `None`.
- `memcmp(a, b, n)` returns the difference of the first differing bytes, or 0.
- `memcpy(dst, src, n)` and `memmove(dst, src, n)` (safe for overlapping views).
- `strlen(buf)` counts up to the first NUL (works on `str` too).
- `strlcpy(dst, src, size)` and `strlcat(dst, src, size)` copy or append
  NUL-terminated strings within `size` bytes and return the length they tried
  to create.

### `ftkit.strings`

Number conversion, searching and comparison. Searches return indices, or
`None` when nothing is found; the end of a string counts as a terminating NUL.

- `atoi(text)` parses leading whitespace, one optional sign and digits; it
  returns 0 when no digits follow and wraps like a 32-bit signed integer.
- `itoa(n)` returns the decimal form of `n`.
- `strchr(text, ch)`, `strrchr(text, ch)` find the first or last occurrence;
  searching for `"\0"` gives `len(text)`.
- `strcmp(s1, s2)`, `strncmp(s1, s2, n)` compare `str`, `bytes` or
  `bytearray` values and return the difference of the first differing
  characters, or 0.
- `strnstr(haystack, needle, n)` finds `needle` lying wholly within the first
  `n` characters; an empty needle gives 0.

### `ftkit.text`

Building new strings.

- `split(text, sep)` splits on a single character and drops empty pieces.
- `strdup(text)`, `strjoin(s1, s2)`.
- `substr(text, start, length)` returns an empty string when `start` is past
  the end.
- `strtrim(text, charset)` strips characters in `charset` from both ends.
- `striteri(chars, func)` calls `func(index, item)` on each item of a mutable
  sequence; a non-`None` return value replaces the item in place.
- `strmapi(text, func)` builds a new string from `func(index, char)`, which
  must return a single character.

### `ftkit.output`

`put_char`, `put_str`, `put_endl` and `put_nbr` write to a text stream given as
the second argument, or to standard output when it is omitted.

### `ftkit.printf`

`sprintf(fmt, *args)` supports `%c %s %d %i %u %x %X %p %%`, with no flags,
widths or precisions. `%d`/`%i` wrap to a signed 32-bit value, `%u`/`%x`/`%X`
to an unsigned 32-bit value, `%p` prints `0x...` or `(nil)` for 0 or `None`,
and `%s` prints `(null)` for `None`. An unknown conversion or a trailing lone
`%` raises `ValueError`; too few arguments raise `TypeError`; extra arguments
are ignored.

`printf(fmt, *args, stream=None)` formats the same way, writes the result and
returns its length. Nothing is written if formatting fails.

### `ftkit.lines`

`LineReader(source, buffer_size=2)` reads from an open file descriptor or from
any object with a `read(size)` method returning `str` or `bytes`. `read_line()`
returns the next line with its trailing newline (the last line may lack one),
or `None` when the source has nothing more; iterating over the reader yields
lines until then.

`get_next_line(fd, buffer_size=2)` returns the next line of a file descriptor
as `bytes`, or `None` at its end. Buffered data is kept per descriptor between
calls and dropped when the end is reached or a read fails.

## Examples

```python
from ftkit.strings import atoi, itoa
from ftkit.text import split, strtrim
from ftkit.printf import sprintf

atoi("   -123abc")             # -123
itoa(-42)                      # "-42"
split("  hello  world ", " ")  # ["hello", "world"]
strtrim("xxhixx", "x")         # "hi"
sprintf("%s has %d items (%x)", "box", 255, 255)  # "box has 255 items (ff)"
```

Reading lines:

```python
import io
from ftkit.lines import LineReader

reader = LineReader(io.StringIO("first\nsecond\nthird"), buffer_size=4)
for line in reader:
    print(repr(line))        # 'first\n', 'second\n', 'third'
```

## What it does not do

This is a library only: it installs no command-line program.

## Running the tests

```
pip install ftkit[test]
pytest
```