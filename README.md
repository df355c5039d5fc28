# contestkit

Small, dependency-free building blocks and solvers for problems that come up
again and again in programming contests. Everything is a plain function or
class that takes Python values and returns Python values.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

### `contestkit.disjoint_sets`

- `UnionFind(n)`: a fixed-size structure over `0 .. n-1` with union by rank
  and path compression. Methods: `find_set(i)`, `is_same_set(i, j)`,
  `union_set(i, j)`, `num_disjoint_sets()` and `size_of_set(i)`. An element
  outside the range raises `IndexError`. A negative `n` raises `ValueError`.
- `SizeDisjointSet()`: joins sets by size, without path compression.
- `RankDisjointSet()`: joins sets by rank, with path compression.
- `RandomDisjointSet(rng=None)`: joins sets by random priority. You can pass
  a `random.Random` to make it reproducible.

The last three accept any hashable element. Each element is added with
`make_set(v)`. They also offer `find_set(v)`, `union_sets(a, b)`, and
`parent(v)` for the direct parent of an element.

### `contestkit.number_theory`

- `extended_gcd(a, b)` returns `(d, x, y)` with `a*x + b*y == d`.
- `add_one(x)` adds one to a signed 32-bit integer using bit operations only.
  It wraps at the top of the range and raises `ValueError` for values that do
  not fit in 32 bits.
- `opposite_signs(x, y)` tells whether two integers have opposite signs.
- `max_divide(a, b)` divides `a` by `b` for as long as the division is exact.
- `is_ugly(n)` tells whether the only prime factors of `n` are 2, 3 and 5.
- `nth_ugly_number(n)` returns the `n`-th ugly number, counting 1 as the first.
- `linear_sieve(limit)` lists the primes up to `limit`, inclusive.
- `coin_exchange(n)` gives the best value for a coin `n` that may be split into
  `n//2`, `n//3` and `n//4`, recursively.

### `contestkit.queens`

- `n_queens(n)` yields every placement of `n` non-attacking queens. Each
  placement is a tuple of 1-based columns, one per row.
- `format_solution(solution)` renders a placement as
  `(row,column) : (1,c1)(2,c2)...`.

### `contestkit.min_stack`

- `MinStack` offers `push`, `pop`, `top`, `minimum` and `len()`. Each of them
  runs in constant time. `pop`, `top` and `minimum` raise `IndexError` on an
  empty stack.
- `minimum_until_negative(values)` pushes values until the first negative one
  and returns the minimum. It raises `ValueError` if nothing was pushed.

### `contestkit.counting`

- `command_probability(sent, received)`: the chance that a `+`/`-` command
  string, with each `?` in `received` decided by a fair coin, ends where
  `sent` ends.
- `cupcakes_happy(tastiness)`: whether every proper contiguous segment sums to
  less than the whole.
- `candy_days(r, g, b)`: the most days you can eat two candies of different
  colours per day.
- `tokens_saved(tokens, a, b)`: the tokens kept each day while still earning
  the most money.
- `tanks_product(numbers)`: the product, as a decimal string, of numbers of
  which all but at most one are powers of ten.
- `taxi_count(groups)`: the fewest four-seat taxis for groups of 1 to 4.
- `triangle_minutes(a, b, c)`: the fewest unit lengthenings that make three
  sticks into a proper triangle.

### `contestkit.greedy`

- `burglar_matches(capacity, containers)` and
  `burglar_matches_by_count(capacity, containers)`: the most matches that fit
  in `capacity` boxes. `containers` holds `(boxes, matches_per_box)` pairs.
- `min_max_digits(length, digit_sum)`: the smallest and largest numbers with
  `length` digits whose digits add up to `digit_sum`. When no such number
  exists, both are `("-1", "-1")`.
- `max_ones_after_flip(bits)`: the most ones you can get by flipping exactly
  one non-empty segment of a 0/1 sequence.

### `contestkit.grids`

- `moves_to_center(matrix)`: the adjacent row and column swaps needed to move
  the single 1 of a 5×5 matrix to its centre.
- `can_paint_square(grid)`: whether a 4×4 grid of `.` and `#` has a 2×2
  square of one colour, or can get one by repainting at most one cell.

Invalid input, such as wrong sizes, negative counts or unexpected
characters, raises `ValueError`.

## Example

```python
from contestkit.disjoint_sets import UnionFind
from contestkit.number_theory import extended_gcd, nth_ugly_number
from contestkit.queens import format_solution, n_queens

uf = UnionFind(5)
uf.union_set(0, 1)
uf.union_set(2, 3)
print(uf.num_disjoint_sets())   # 3
print(uf.is_same_set(0, 3))     # False

print(nth_ugly_number(150))     # 5832
print(extended_gcd(30, 12))     # gcd with Bezout coefficients

for placement in n_queens(4):
    print(format_solution(placement))
```

## What it does not do

The package has no command-line program. It does not read problem input from
standard input or files, and it does not print answers. You call the
functions with your own values and get the answers back.