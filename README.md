# iterkit

Iterator adaptors and helpers that go beyond the standard `itertools`
module. Most adaptors take any iterable and pull elements only as they are
needed; the exceptions are noted below. The package has no dependencies
outside the standard library. The `test` extra brings in pytest and
hypothesis for the test suite.

## Modules

| Module | Contents |
| --- | --- |
| `iterkit.extrema` | `min_set`, `max_set`, `min_set_by`, `max_set_by` |
| `iterkit.combinatorics` | `binomial`, `combinations`, `combinations_with_replacement`, `Combinations`, `CombinationsWithReplacement` |
| `iterkit.putback` | `put_back` and `PutBack`, an iterator that accepts one pushed-back value |
| `iterkit.duplicates` | `duplicates`, `duplicates_by` |
| `iterkit.exactly_one` | `exactly_one`, `at_most_one`, `ExactlyOneError` |
| `iterkit.folding` | `concat`, `cons_tuples` |
| `iterkit.results` | `Ok`, `Err`, `map_ok`, `filter_ok`, `filter_map_ok`, `flatten_ok`, `map_into` |
| `iterkit.coalesce` | `coalesce`, `dedup`, `dedup_by`, `dedup_with_count`, `dedup_by_with_count` |
| `iterkit.multi_product` | `multi_cartesian_product`, `MultiProduct` |
| `iterkit.adaptors` | `interleave`, `interleave_shortest`, `cartesian_product`, `batching`, `step`, `take_while_ref`, `while_some`, `tuple_combinations`, `positions`, `update` |

## Examples

```python
from iterkit.combinatorics import combinations, binomial
from iterkit.coalesce import dedup_with_count
from iterkit.adaptors import interleave
from iterkit.exactly_one import exactly_one, ExactlyOneError

list(combinations("abc", 2))
# [['a', 'b'], ['a', 'c'], ['b', 'c']]

binomial(5, 2)
# 10

list(dedup_with_count([1, 1, 2, 3, 3, 3]))
# [(2, 1), (1, 2), (3, 3)]

list(interleave([7, 9, 8, 10], [2, 77]))
# [7, 2, 9, 77, 8, 10]

exactly_one(x for x in range(10) if x == 2)
# 2

try:
    exactly_one(x for x in range(10) if 1 < x < 4)
except ExactlyOneError as err:
    list(err)  # the elements are handed back: [2, 3]
```

`Combinations.count()`, `CombinationsWithReplacement.count()` and
`MultiProduct.count()` give the number of items still to come, and they use
up the iterator.

### Pushing a value back

```python
from iterkit.putback import put_back

it = put_back([1, 2, 3])
first = next(it)
it.put_back(first)
list(it)
# [1, 2, 3]
```

`take_while_ref` in `iterkit.adaptors` works on a `PutBack`. It puts back the
first element that fails the predicate, so the caller can still read that
element. It raises `TypeError` for any other iterator.

### Streams of results

```python
from iterkit.results import Ok, Err, map_ok

list(map_ok([Ok(1), Err("bad"), Ok(3)], lambda v: v * 10))
# [Ok(value=10), Err(error='bad'), Ok(value=30)]
```

Any item that is neither `Ok` nor `Err` raises `TypeError`. `coalesce` uses
the same types: its function returns `Ok(joined)` to merge two neighbours, or
`Err((previous, current))` to keep them apart.

## Behaviour to be aware of

- `cartesian_product(i, j)` reads `j` in full when iteration starts. It does
  not read `i` at all when `j` is empty.
- `multi_cartesian_product` reads every input iterable in full when it is
  built. With no iterables, it yields nothing.
- `step(iterable, n)` and `tuple_combinations(iterable, k)` raise `ValueError`
  when `n` or `k` is not positive. `combinations` and
  `combinations_with_replacement` raise `ValueError` for a negative `k`.
- `concat` copies the first item before extending it, and returns its
  `default` (None unless given) for an empty input.

## What is not included

The package has no value type for pairing two iterables of unequal length
(left only, right only, or both), and it has no lock-step diff of two
iterators.