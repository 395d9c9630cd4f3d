# pushswap

Building blocks for the push_swap puzzle: two stacks, `a` and `b`, with
the eleven operations on them, and strict reading of the integers the
puzzle starts from. A few general helpers for strings, bytes, characters,
numbers, output and linked lists come with it.

## Installation

```
pip install .
```

## The stacks

`pushswap.stacks.Stacks` holds stack `a` (filled from the values given)
and an empty stack `b`, both with their top at the left, and a list
`moves` that records the name of every operation that took effect.

| Method | Effect |
|--------|--------|
| `sa` / `sb` | swap the top two elements of `a` or `b` |
| `ss` | `sa` then `sb`, each logged, then `ss` logged as well |
| `pa` / `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra` / `rb` | rotate `a` or `b` up (the top goes to the bottom) |
| `rra` / `rrb` | rotate `a` or `b` down (the bottom comes to the top) |
| `rr` / `rrr` | rotate both stacks up or down |

An operation on an empty stack does nothing and logs nothing. `rr` and
`rrr` with `a` non-empty but `b` empty rotate `a` and log nothing.

```python
from pushswap.stacks import Stacks

stacks = Stacks([3, 1, 2])
stacks.sa()
stacks.pb()
print(stacks)         # Stacks(a=[3, 2], b=[1])
print(stacks.moves)   # ['sa', 'pb']
```

## Reading the input

`pushswap.parsing.read_arguments(argv)` turns a list of arguments into
integers. A single argument is split on spaces; several arguments give
one value each; no arguments give an empty list. It raises
`pushswap.parsing.ParseError` (a `ValueError`) when a value is not an
integer, lies outside the 32-bit signed range, or repeats another value.
`split_numbers`, `parse_values` and `has_duplicates` expose the separate
steps.

```python
from pushswap.parsing import read_arguments, ParseError

read_arguments(["3 2 1"])        # [3, 2, 1]
read_arguments(["3", "-7"])      # [3, -7]
try:
    read_arguments(["1", "1"])
except ParseError:
    print("Error")
```

## Other helpers

- `pushswap.ftprintf`: `format_printf` builds text for `%c %s %p %d %i
  %u %x %X %%`; `printf` writes it to standard output and returns its
  length.
- `pushswap.numbers`: `parse_int`, `parse_long` (invalid text gives 0,
  overflow wraps) and `int_to_string`.
- `pushswap.chars`: `is_alnum`, `is_alpha`, `is_ascii`, `is_digit`,
  `is_print`, `to_lower`, `to_upper` on character codes.
- `pushswap.strings`: `string_length`, `find_char`, `find_last_char`,
  `compare_prefix`, `find_within`, `substring`, `join`, `trim`,
  `map_indexed`, `each_indexed`, `duplicate`, `bounded_copy`,
  `bounded_concat`.
- `pushswap.memory`: `zero`, `allocate_zeroed`, `find_byte`,
  `compare_bytes`, `copy_bytes`, `move_bytes`, `fill_bytes` on byte
  buffers.
- `pushswap.output`: `put_char`, `put_str`, `put_endl`, `put_number`
  write to a text stream, standard output by default.
- `pushswap.linkedlist`: `LinkedList` of `Node`s with `push_front`,
  `push_back`, `last`, `delete_first`, `clear`, `for_each`, `map`,
  `len()` and iteration.

## What the package does not do

It has no sorting strategy: nothing here works out a sequence of
operations that sorts stack `a`; the operations must be called by hand
or by your own code. There is also no command-line program; the package
is used as a library only.

## Tests

```
pip install .[test]
pytest
```