# printfmt

A compact printf-style formatter, together with small helpers for
characters, strings, byte buffers and singly linked lists. It has no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Formatting

`printfmt.formatter` provides `format_string`, `printf` and the `Flags`
dataclass, which holds the parsed state of one conversion.

| Conversion | Argument                                                    |
|------------|-------------------------------------------------------------|
| `%c`       | a one-character string, or an integer (its low byte)        |
| `%s`       | a string; `None` prints `(null)`                            |
| `%p`       | an integer address, or any other object (its `id()`), as `0x...`; `0` or `None` prints `(nil)` |
| `%d`, `%i` | an integer, taken as a signed 32-bit value                  |
| `%u`       | an integer, taken as an unsigned 32-bit value               |
| `%x`, `%X` | an integer, unsigned 32-bit, in lower- or upper-case hex    |
| `%%`       | a literal percent sign (takes no argument)                  |

A width, a `.precision` and the `-`, `0`, `+` and `#` flags are recognised.
Their combinations follow this formatter's own rules, which differ from C's
`printf` in several corner cases: `+` only narrows the padding and prints no
sign, `#` shifts the digits, and a left-justified negative number carries
its sign after the digits.

```python
from printfmt.formatter import format_string, printf

format_string("%07i", -54)      # '-000054'
format_string("%08.5i", 34)     # '   00034'
format_string("%.0i", 0)        # ''

count = printf("%s=%d\n", "answer", 42)   # writes to stdout, returns 10
```

`format_string` returns the formatted text and raises `TypeError` when there
are too few arguments or an argument has the wrong type. `printf` writes the
text to standard output and returns its length. A lone `%` at the end of the
format is printed as is; an unfinished specification prints nothing.

There are no floating-point, octal or length-modifier conversions.

## Command line

```
printfmt
```

Runs seven sample integer conversions. For each one it prints a heading,
then the result of Python's own `%` operator followed by its length between
bars, then on the next line the result of `printf` followed by its count
between bars, so the two can be compared.

## Helpers

- `printfmt.chars`: `is_alnum`, `is_alpha`, `is_ascii`, `is_digit`,
  `is_print` (ASCII classification of a character or an integer code),
  `to_upper`, `to_lower`, `atoi` (leading whitespace skipped, 0 when more
  than one sign precedes the digits, 32-bit wrap-around) and `itoa`.
- `printfmt.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`, each
  writing to a given text stream, standard output by default.
- `printfmt.strops`: `strchr`, `strrchr`, `strnstr` (returning an index or
  `None`), `strncmp`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi`,
  `striteri` (in place on a mutable sequence of characters), and `strlcpy`
  and `strlcat`, which return the resulting text together with the length
  the full result would have had.
- `printfmt.memory`: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`,
  `memcmp` on `bytes`, `bytearray` and `memoryview` buffers, and `calloc`,
  which returns a zero-filled `bytearray` and raises `OverflowError` when
  the size would not fit in 64 bits.
- `printfmt.lists`: `Node` and `LinkedList`, with `push_front`,
  `push_back`, `last`, `clear`, `iterate`, `map`, `len()` and iteration
  over the contents.

```python
from printfmt.lists import LinkedList

items = LinkedList([1, 2, 3])
items.push_back(4)
doubled = items.map(lambda x: x * 2)
list(doubled)   # [2, 4, 6, 8]
```