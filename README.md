# pushswap

Sort a list of distinct integers with two stacks, `a` and `b`, using only
eleven moves, and check whether a list of moves sorts a given input.

## Moves

| Name  | Effect                                        |
|-------|-----------------------------------------------|
| `sa`  | swap the top two elements of `a`              |
| `sb`  | swap the top two elements of `b`              |
| `ss`  | `sa` and `sb` together                        |
| `pa`  | move the top of `b` onto `a`                  |
| `pb`  | move the top of `a` onto `b`                  |
| `ra`  | rotate `a` up (top goes to the bottom)        |
| `rb`  | rotate `b` up                                 |
| `rr`  | `ra` and `rb` together                        |
| `rra` | rotate `a` down (bottom goes to the top)      |
| `rrb` | rotate `b` down                               |
| `rrr` | `rra` and `rrb` together                      |

A move that cannot act (swapping or rotating a stack of fewer than two
elements, pushing from an empty stack) leaves the stacks unchanged.

## Installation

```
pip install .
```

## Commands

`push_swap` takes the numbers as arguments, the first one ending up at the
top of stack `a`, and prints the moves that sort them, one per line. An
argument may hold several numbers separated by spaces.

```
push_swap 3 1 2
push_swap "5 4 3 2 1"
```

Nothing is printed when the input is already sorted or no arguments are
given. Invalid input (something that is not an optionally signed decimal
integer, a value outside the 32-bit signed range, an argument with no number
in it, or a repeated value) prints `Error` on standard error and exits with
status 1.

Five numbers or fewer are sorted with a few targeted moves; larger inputs
are moved to `b` in chunks by rank and pulled back largest first.

`checker` takes exactly one number per argument, reads moves from standard
input, one per line, and prints `OK` if they leave `a` sorted and `b` empty,
`KO` otherwise. An invalid number, a repeated value or a line that names no
move prints `Error` on standard error and exits with status 1.

```
push_swap 3 1 2 | checker 3 1 2
```

Both commands can also be run as `python -m pushswap.cli` and
`python -m pushswap.checker`.

## Using it from Python

```python
from pushswap.sorting import sort_stack
from pushswap.checker import run_checker

ops = sort_stack([3, 1, 2])
print([op.value for op in ops])
print(run_checker([3, 1, 2], [op.value for op in ops]))  # True
```

- `pushswap.operations` has `Operation`, an enum of the eleven moves, and
  `Stacks`, which holds both stacks as deques (top on the left) with one
  method per move, `apply()` for an `Operation` or its name, and
  `is_solved()`. With `record=True` every move is appended to `history`.
  `parse_operation()` turns a name into an `Operation`.
- `pushswap.parsing` validates and reads arguments: `parse_arguments()`
  (several numbers per argument), `parse_arguments_strict()` (one per
  argument), both raising `ParseError`, plus `is_valid_number()`,
  `has_duplicates()`, `is_sorted()` and `assign_index()`.
- `pushswap.sorting` has `sort_stack()`, which returns the list of moves,
  and the steps it uses: `sort_small()`, `sort_three()`, `sort_five()`,
  `sort_chunks()` and `chunk_count()`.
- `pushswap.checker` has `execute_instruction()` and `run_checker()`.

The package also carries small helpers used by these modules or alongside
them: `chars` (ASCII classification and case conversion), `numbers`
(`atoi`, `itoa`), `searching` and `textops` (C-style string and byte
searching, comparison, splitting, trimming and bounded copying), `memory`
(filling and copying byte buffers), `output` (writing characters, strings
and numbers to a stream), `linkedlist` (`LinkedList` and `ListNode`) and
`linereader` (`LineReader`, which reads a stream or file descriptor line by
line through a fixed-size buffer).

## Running the tests

```
pip install .[test]
pytest
```