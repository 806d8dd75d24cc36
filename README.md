# drills

Small, self-contained exercises: integer arithmetic, number theory,
simple statistics over lists of scores, and text patterns drawn with
asterisks. The library functions take Python values and return Python
values; they do not read input or print. A small `drills` command runs
three of the exercises on test cases read from standard input.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library

Functions raise `ValueError` when their input is outside what the
exercise allows, for example a non-positive divisor or an empty list
where at least one value is needed.

### `drills.arithmetic`

- `share_candies(candies, brothers)`: `(each, left_for_dad)`, by `divmod`
- `polyhedron_faces(vertices, edges)`: `2 + edges - vertices`
- `factorial(n)`, `fibonacci(n)` (with `fibonacci(0) == 0`), `gcd_lcm(a, b)`
- `sum_comma_pair(text)`: adds the two integers of a string such as `"3,4"`
- `check_digit(digits)`: the sum of the squared digits, modulo 10
- `domino_pips(n)`: the number of pips in a domino set up to double-`n`
- `total(values)`: the sum of the values
- `dice_report(rolls)`: one `"Case x: sum"` line per pair, numbered from 1
- `car_price(base, options)`: base price plus quantity × price of each option
- `leftover_apples(schools)`: apples left over, given `(students, apples)` per school
- `plug_capacity(strips)`: computers that chained power strips can supply from one socket
- `reversed_max(a, b)`: the larger of two numbers when each is read backwards

### `drills.numbers`

- `perfect_squares(low, high)` and `prime_summary(low, high)`: `(sum, smallest)`
  of the squares or primes in `[low, high]`, or `None` if there are none
- `odd_summary(values)`: `(sum, smallest)` of the odd values, or `None`
- `count_primes(values)`: how many of the values are prime
- `kth_divisor(n, k)`: the k-th smallest divisor of `n`, or `0` if there is none
- `digit_counts(a, b, c)`: how often each digit 0–9 appears in `a * b * c`
- `distinct_remainders(values)`: the number of distinct remainders modulo 42
- `yut_result(sticks)`: `"A"` to `"E"` for a throw of four yut sticks (each 0 or 1)

### `drills.statistics`

- `min_max(values)`, `count_value(values, target)`, `less_than(values, limit)`
- `semester_summary(courses)`: total credits and credit-weighted average
  from `(credits, grade)` pairs
- `adjusted_average(scores)`: the average after scaling the best score to 100
- `peak_passengers(stops)`: the most people on board, given `(got_off, got_on)` per stop
- `max_with_position(values)`: the largest value and its 1-based position
  (the last one on a tie)
- `cooking_winner(scores)`: the 1-based contestant with the highest total, and that total
- `judge_total(scores)`: the total of five scores without the highest and
  lowest, or `None` when the remaining scores are four or more apart
- `streak_score(results)`: each correct answer (1) scores the length of its streak
- `count_violations(day, cars)`: cars whose last digit matches the day's

### `drills.stars`

Each function returns a list of lines for a pattern of size `n` (`n >= 1`):
`triangle`, `inverted_triangle`, `diamond`, `butterfly`, `hourglass`,
`right_arrow` and `right_arrow_aligned`.

## Example

```python
from drills.arithmetic import factorial, fibonacci
from drills.stars import diamond

factorial(5)    # 120
fibonacci(10)   # 55
print("\n".join(diamond(3)))
```

## Command line

```
drills {candy,comma,dice} < input.txt
drills --help
```

Each command reads a number of test cases followed by the cases from
standard input, and prints one line per case:

- `candy`: pairs of candies and brothers; prints
  `You get X piece(s) and your dad gets Y piece(s).`
- `comma`: one `a,b` line per case; prints the sum
- `dice`: pairs of dice throws; prints `Case x: sum`

On malformed input the command prints `drills: error: ...` to standard
error and exits with status 1.

## Limits

Only the three exercises above are reachable from the command line; the
rest are available as library functions only.