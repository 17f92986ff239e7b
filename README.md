# aclib

Small, self-contained algorithms and data structures for competitive
programming and everyday number crunching. The package depends on nothing
but the Python standard library.

## Installation

```
pip install .
```

The `test` extra (`pip install ".[test]"`) adds pytest for running the
test suite in `tests/`.

## Modules

| Module | Contents |
| --- | --- |
| `aclib.cumsum` | `CumSum`: prefix sums with O(1) half-open interval sums |
| `aclib.imos` | `Imos1D`: totals per time point for `(start, end, value)` intervals |
| `aclib.dic_order` | `kth_dic_order`, `next_permutation` |
| `aclib.aggregate` | `maximum`, `minimum`, `total`, `product`, `mean` |
| `aclib.divisors` | `divisors_pair`, `divisors` |
| `aclib.gcd` | `gcd_recursive`, `lcm_recursive` |
| `aclib.counting` | `Counting`: factorials, nPk, nCk and nHk modulo a prime |
| `aclib.modint` | `ModInt`: integers modulo m with `+`, `-`, `*` |
| `aclib.modulo` | `mod_pow`, `ex_euclid`, `inverse_mod_mul` |
| `aclib.prime` | `fast_primes` (linear sieve), `factorization` (trial division) |
| `aclib.interval_sieve` | `IntervalSieve`: primality over `[low, high]` |
| `aclib.sieve` | `SieveOfEratosthenes`: smallest prime factors, factorization, Euler's phi |
| `aclib.integer_sort` | `counting_sorted`, `counting_sorted_with`, `radix_sorted`, `radix_sorted_with` |
| `aclib.rational` | `Rational`: fractions whose arithmetic results are reduced |
| `aclib.bipartite` | `is_bipartite` |
| `aclib.knapsack_dp` | `knapsack_dp_value`, `knapsack_dp_value_solve`, `knapsack_dp_weight`, `dp_weight_with_backtrack` |
| `aclib.meet_in_the_middle` | `knapsack_half_enumerate` |
| `aclib.knapsack` | `knapsack`: chooses one of the solvers above by problem size |
| `aclib.euler_tour` | `undirected_neighbors`, `euler_tour` |
| `aclib.adjacency` | `AdjacencyList`: directed/undirected, weighted/unweighted graphs with `bfs`, `dfs`, `dijkstra` |
| `aclib.shortest_path` | `dijkstra_one_to_one`, `dijkstra_one_to_many` over `(neighbour, weight)` lists |
| `aclib.tree` | `diameter_of_tree` |
| `aclib.grid` | `field_to_directed_grid`: `'.'`/`'#'` maps to an `AdjacencyList` |

## Examples

Prefix sums (`None` means an open end):

```python
from aclib.cumsum import CumSum

cum = CumSum(range(11))
cum.interval_sum(3, 6)      # 3 + 4 + 5 == 12
cum.interval_sum(5, None)   # 45
```

Combinatorics modulo a prime:

```python
from aclib.counting import Counting

c = Counting(100, 1_000_000_007)
c.combination(10, 3)        # 120
c.factorial(100)            # 437918130
```

Dictionary order:

```python
from aclib.dic_order import kth_dic_order, next_permutation

s = list("acb")
next_permutation(s)         # True
"".join(s)                  # "bac"

kth_dic_order(list("aabbcc"), 2)   # ['a', 'a', 'b', 'c', 'b', 'c']
```

Shortest paths on an adjacency list:

```python
from aclib.adjacency import AdjacencyList

edges = [(0, 1, 1), (1, 2, 3), (2, 0, 2), (0, 3, 1), (3, 4, 7), (4, 0, 2)]
graph = AdjacencyList.weighted_undirected(5, edges)
graph.dijkstra(1, 4)        # (3, [1, 0, 4])
graph[0, 1]                 # 1, the weight of edge 0 -> 1
```

Knapsack:

```python
from aclib.knapsack import knapsack

knapsack(3, 10, [9, 6, 4], [15, 10, 6])   # 16
```

## Behaviour worth knowing

- `kth_dic_order` counts from 1 (0 is treated as 1) and raises `ValueError`
  when `k` is larger than the number of distinct arrangements.
- `Rational` raises `ZeroDivisionError` for a zero denominator, including
  dividing by a zero fraction. Equality compares reduced forms.
- `ModInt` arithmetic uses the modulus of the left operand.
- `Counting` raises `IndexError` for arguments beyond the prepared `max_n`.
- `IntervalSieve.is_prime` raises `ValueError` for numbers outside both the
  interval and its small base table. Intervals that start at 0 or 1 do not
  classify their smallest numbers correctly; it is meant for intervals of
  larger numbers.
- `dijkstra_one_to_many` raises `KeyError` when the start node has no entry
  in the neighbour mapping; when the goal is reached it returns only
  `{goal: cost}`.
- `diameter_of_tree` raises `ValueError` for an empty tree.

## What it does not do

This is a library only: it has no command-line tool and reads or writes no
files.