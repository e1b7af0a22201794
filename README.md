# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
set of instructions, then prints the instructions it used, one per line.

## Instructions

| Instruction | Effect |
|-------------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate up: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | rotate down: the bottom element goes to the top |

A move that finds too few elements on its stack leaves it unchanged.

## Command line

```
pip install .
push-swap 3 1 2
push-swap "5 -4 12 0 7"
```

The numbers may be given as separate arguments or as one space-separated
argument; the first number is the top of stack `a`. Each must be a whole
number in the 32-bit signed range, with an optional `+` or `-` sign, and no
number may appear twice. On invalid input the command prints `Error` and
exits with status 1. With no arguments, or a single empty argument, it exits
with status 1 and prints nothing. Input that is already sorted prints
nothing and exits with status 0.

The same entry point runs as `python -m pushswap.cli`.

## How it sorts

Two numbers are sorted with a single `sa`. For more, the numbers are moved to
`b` one at a time, each time choosing the one that costs the fewest moves to
place just above the closest smaller value in `b`, until three remain in `a`.
Those three are sorted in at most two moves, then `b` is pushed back onto
`a`, each number landing above the closest larger value, and finally `a` is
rotated until its smallest number is on top.

## Library

```python
from pushswap.algorithm import solve
from pushswap.stacks import PushSwap, is_sorted

ops = solve([3, 1, 2])           # the instructions that sort the list

game = PushSwap([3, 1, 2])
for op in ops:
    game.apply(op)               # an Operation or its name, such as "ra"
assert game.solved and is_sorted(game.a)
```

- `pushswap.stacks`: `Operation`, an enum of the eleven instructions, and
  `PushSwap`, holding lists `a` and `b` (top first) and the `operations`
  made so far, with one method per instruction.
- `pushswap.algorithm`: `solve`, `sort_stacks`, `sort_three`, and the cost
  helpers `targets_in_b`, `targets_in_a`, `push_costs` and
  `cheapest_position`.
- `pushswap.parsing`: `parse_arguments` and `parse_numbers` check and convert
  input, raising `InputError` (a `ValueError`) on bad input; also
  `is_valid_number`, `parse_long`, `split_words` and `count_words`.
- `pushswap.cli`: `run` does what the command does and returns the
  instructions; `main` is the command itself.

The `pushswap.lib` package holds small helpers:

- `chars`: ASCII classification and case conversion.
- `memory`: filling, searching, comparing and copying byte buffers.
- `strings`: C-style string operations on positions, such as `strchr`,
  `strnstr`, `strlcpy` and `substr`.
- `linked_list`: `LinkedList`, a singly linked list.
- `output`: writing characters, strings and numbers to a text stream.
- `printf`: `format_string` and `printf` for `%c %s %p %d %i %u %x %X %%`.
- `line_reader`: `LineReader`, reading a file descriptor line by line in
  fixed-size chunks.

## What it does not do

There is no command that reads a list of instructions and checks whether
they sort a given input. To check a solution, replay it with
`PushSwap.apply` and look at `PushSwap.solved`.

## Tests

```
pip install ".[test]"
pytest
```