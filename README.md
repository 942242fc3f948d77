# algokit

Classic algorithms and data structures in plain Python, with no runtime
dependencies. Requires Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.strings` | `suffix_array`, `longest_repeated_substring_length`, `lcs_length`, `longest_common_subsequence` |
| `algokit.dp` | `knapsack_max_value` (0/1 knapsack indexed by value), `lis_length_quadratic`, `lis_length` |
| `algokit.digitdp` | `count_investigation`, `count_magic_numbers`, `count_prime_digit_sum_multiples`, `MOD` |
| `algokit.mathutils` | `sieve_primes`, `prime_factor_count`, `mod_pow`, `extended_gcd`, `mod_inverse`, `BinomialTable`, `Point`, `polar_angle`, `twice_triangle_area`, `MOD`, `DEFAULT_PRIME_LIMIT` |
| `algokit.graphs` | `undirected_adjacency`, `bfs` (returns a `BfsResult`), `count_at_distance`, `topological_sort`, `has_cycle`, `grid_has_cycle`, `CycleError` |
| `algokit.dsu` | `DisjointSet` with path compression |
| `algokit.bst` | `BinarySearchTree` (unbalanced; equal values go right) |
| `algokit.trie` | `WeightedTrie` for best-weight prefix suggestions |
| `algokit.bucketing` | `contains_nearby_almost_duplicate` |

### Notes on behaviour

- `suffix_array(text)` returns suffix start positions in sorted order;
  `longest_repeated_substring_length(text)` is the longest common prefix of
  neighbouring suffixes.
- `knapsack_max_value(capacity, items)` takes `(weight, value)` pairs and
  raises `ValueError` on negative weights or values.
- `count_investigation(low, high, k)` counts numbers in `[low, high]` that are
  divisible by `k` and whose digit sum is divisible by `k`; it returns 0 when
  `k > 100`.
- `count_magic_numbers(m, d, low, high)` counts d-magic multiples of `m` in
  `[low, high]` modulo `MOD`; the bounds are decimal strings or integers with
  the same number of digits.
- `count_prime_digit_sum_multiples(low, high, k)` counts multiples of `k`
  whose digit sum is a prime below 100; the bounds may come in either order.
- `bfs(adjacency, source)` returns a `BfsResult` with `order`, `distance`
  and `parent` (the source's parent is `None`).
- `topological_sort(adjacency)` raises `CycleError` (a `ValueError`) when the
  directed graph has a cycle; `has_cycle` reports the same as a boolean.
- `grid_has_cycle(grid)` tells whether side-adjacent equal cells form a cycle.
- `DisjointSet.find` raises `KeyError` for an item never added with
  `make_set`; `union` returns whether the two sets were separate.
- `WeightedTrie.best_suggestion(prefix)` returns `None` when no stored word
  starts with the prefix.
- `BinomialTable(size, modulus)` needs a prime modulus; `ncr(n, r)` returns 0
  for `r > n` and raises `ValueError` for `n >= size`.

## Examples

```python
from algokit.strings import longest_common_subsequence, suffix_array
from algokit.graphs import bfs, topological_sort, undirected_adjacency
from algokit.dsu import DisjointSet
from algokit.trie import WeightedTrie
from algokit.mathutils import BinomialTable, mod_pow

suffix_array("banana")                       # [5, 3, 1, 0, 4, 2]
longest_common_subsequence("axyb", "abyxb")  # one longest common subsequence

graph = undirected_adjacency([(0, 1), (1, 2)])
result = bfs(graph, 0)
result.order                                 # [0, 1, 2]
result.distance                              # {0: 0, 1: 1, 2: 2}

topological_sort({0: [1], 1: [2], 2: []})   # [0, 1, 2]; raises CycleError on a cycle

sets = DisjointSet()
sets.make_set("a")
sets.make_set("b")
sets.union("a", "b")
sets.connected("a", "b")                     # True

trie = WeightedTrie()
trie.insert("dassd", 34)
trie.insert("dasse", 45)
trie.best_suggestion("dass")                 # 45
trie.best_suggestion("x")                    # None

mod_pow(2, 10, 1_000_000_007)                # 1024
BinomialTable(100, 1_000_000_007).ncr(5, 2)  # 10
```

## What it does not do

algokit is a library only. It has no command-line program and does not read
problem input from standard input; every routine is called from Python with
its data passed as arguments.