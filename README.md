# pushswap

`pushswap` sorts a list of distinct integers using two stacks, `a` and `b`,
and a small fixed set of operations. It prints the operations it performs,
one per line. If you apply them in order, starting with every number on `a`
and `b` empty, `a` ends up sorted in ascending order from top to bottom.

## Operations

| Name  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of `a`                    |
| `sb`  | swap the top two elements of `b`                    |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up: the top element goes to the bottom   |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate `a` down: the bottom element goes to the top |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb` together                            |

## Installation

```
pip install .
```

## Command line

You can pass the numbers as separate arguments:

```
push-swap 3 2 1
```

You can also pass them as one string, separated by spaces:

```
push-swap "3 2 1"
```

Both commands print:

```
sa
rra
```

The first number given goes on top of `a`. The command behaves as follows:

- With no arguments, it prints nothing and exits with status 0.
- If the input is already sorted, it prints nothing and exits with status 0.
- It writes `Error` to standard error and exits with status 1 in these cases:
  - a word is not a plain integer (an optional `+` or `-` followed by digits),
  - a value is outside the 32-bit signed range,
  - a value is repeated,
  - a single argument holds no numbers at all.
- Only spaces separate numbers inside a single argument. A tab, for example,
  makes the word invalid.

## How it sorts

- Two or three numbers are put in order directly.
- Larger inputs go through four steps:
  1. Each number is given its rank. Then numbers are pushed to `b` until
     three remain on `a`. Lower-ranked numbers go first, and the lowest are
     rotated to the bottom of `b`.
  2. The three numbers left on `a` are put in order.
  3. While `b` is not empty, the cost of bringing each of its numbers and its
     place in `a` to the tops is computed. The cheapest number is moved
     there, using `rr`/`rrr` where both stacks turn the same way, and then
     pushed with `pa`.
  4. `a` is rotated the short way round until the smallest number is on top.

## Library use

```python
from pushswap.sorter import push_swap

moves = push_swap([3, 2, 1])   # ["sa", "rra"]
```

The pieces are also available on their own:

- `pushswap.parsing`
  - `parse_args(args)` turns command-line words into a list of integers. It
    raises `ParseError`, a `ValueError`, on bad input.
  - `is_number`, `parse_int`, `split_words` and `has_duplicates` are the
    checks that `parse_args` uses.
- `pushswap.stacks`
  - `Stacks(values)` holds the deques `a` and `b`, top first. It has one
    method per operation (`sa()`, `pb()`, `rra()`, …) and records each
    operation performed in its `operations` list. `values_a()` and
    `values_b()` return the plain values.
  - `pa()` and `pb()` do nothing, and record nothing, when the source stack
    is empty.
  - `is_sorted(elements)` checks a stack's order.
- `pushswap.sorter`
  - `sort(stacks)` sorts a `Stacks` in place.
  - `sort_three(stacks)` orders the top three elements of `a`.
- `pushswap.positions` holds the ranking, cost and cheapest-move steps:
  - `assign_index`
  - `update_positions`
  - `get_target_position`
  - `get_cost`
  - `do_cheapest_move`
  - `shift_stack`

## Not included

There is no checker command. The package produces a list of operations, but
it does not read one back to verify it. To check a result in code, replay the
operations on a `Stacks` yourself.

## Running the tests

```
pip install ".[test]"
pytest
```