# swapcheck

Tools for testing programs that sort integers with two stacks, `a` and `b`,
using the eleven push_swap instructions:

| instruction | effect |
|-------------|--------|
| `sa` / `sb` / `ss` | swap the two top elements of `a`, `b`, or both |
| `pa` / `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra` / `rb` / `rr` | rotate `a`, `b`, or both: the top element goes to the bottom |
| `rra` / `rrb` / `rrr` | reverse-rotate `a`, `b`, or both: the bottom element goes to the top |

An instruction on a stack with too few elements does nothing. An instruction
list is correct when, after it has run, `b` is empty and `a` is in ascending
order from top to bottom.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

Install with the `test` extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

### Check an instruction list

```
swapcheck 3 2 1 < instructions
```

The numbers may be given as separate arguments or together in one quoted
argument (`swapcheck "3 2 1"`); the first number is the top of stack `a`.
Instructions are read from standard input, one per line. The command prints
`OK` if they sort the stack and `KO` if they do not.

It prints `Error` on standard error and exits with status 1 when an argument
holds anything other than blank-separated integers, when a number lies
outside the 32-bit signed range, has a superfluous leading zero or is
repeated, or when a line is not exactly one of the eleven instructions.
With no numbers it prints nothing, reads nothing and exits with status 0.

### Step through an instruction list

```
swapcheck-step 3 2 1
swapcheck-radix-step 30 -4 12
```

`swapcheck-step` reads its instructions from a file named `instructions` in
the current directory (a missing file or an invalid line is an `Error`) and
replays them one at a time: each time Enter is pressed, it clears the screen
and draws both stacks before and after the next instruction. At the end it
reports `KO`, or `OK` together with the number of operations used. If
standard input ends before every instruction has been shown, it exits with
status 1.

`swapcheck-radix-step` does the same with the file `radix_instructions`, but
first replaces every number by its rank (0 for the smallest) and draws the
stacks in binary, with just enough digits for the largest rank, which makes
the passes of a radix sort easy to follow.

### Generate test input

```
swapcheck-gen 500
swapcheck-gen-ranked 100
```

`swapcheck-gen` prints the given number (100 by default) of distinct random
32-bit signed integers, one per line. `swapcheck-gen-ranked` prints the
ranks of such numbers instead, that is, a random permutation of `0 .. n-1`.

### Watch a radix sort

```
swapcheck-radix-demo 5 -3 42 7
```

An interactive walkthrough: it first shows how the numbers are simplified to
their ranks and written in binary, then sorts them with binary radix sort
using only `pb`, `ra` and `pa`. Type `1` to see one pass at a time or `2` to
see one instruction at a time; Enter moves on. The arguments are read
leniently (leading blanks, an optional sign, then digits up to the first
other character) and are not checked for errors.

## Library use

The stacks, the parsers and the checker can be used directly from Python:

```python
import sys

from swapcheck.checker import check
from swapcheck.operations import Operation, Stacks
from swapcheck.parse import InputError, parse_numbers, read_instructions

numbers = parse_numbers(["2 1", "3"])
stacks = Stacks.from_numbers(numbers)
stacks.sa()
assert stacks.is_sorted()

assert check([2, 1, 3], read_instructions(["sa\n"]))
assert not check([2, 1, 3], [Operation.RA])

# Draw the stacks after every instruction.
check([3, 2, 1], ["sa", "rra"], trace=sys.stdout)

try:
    parse_numbers(["1", "1"])
except InputError:
    print("duplicate numbers are rejected")
```

Other modules:

- `swapcheck.display` — `render_stacks` and `render_stacks_binary` draw both
  stacks side by side; `bit_width` and `format_binary` help with the binary
  view.
- `swapcheck.stepper` — `replay` steps through instructions driven by any
  iterable of keys and writes to any text stream; `load_instructions` reads
  an instruction file.
- `swapcheck.generate` — `unique_random_ints` (accepts a `random.Random`)
  and `rank`.
- `swapcheck.radix_demo` — `simplify`, `to_binary`, `render_columns`, and
  `radix_steps`, a generator of every step of the radix sort.
- `swapcheck.lines` — `LineReader` and `read_lines`, buffered reading of
  newline-terminated lines from text or binary streams.
- `swapcheck.search` — `binary_search`, `heap_sort` with an `ascending` or
  `descending` predicate, and `isqrt`.
- `swapcheck.textutil` and `swapcheck.chars` — small string and ASCII
  character helpers.

## What it does not do

swapcheck only checks, replays and generates. It does not start or time the
sorting program under test, and apart from the radix walkthrough it does not
produce instruction lists itself: run your own program and feed its output
to `swapcheck` through a pipe or a file.