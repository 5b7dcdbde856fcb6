# dsakit

Classic data structures and algorithms in plain Python, with no
third-party dependencies: sorting (including sorting files larger than
memory), heaps and priority queues, graph algorithms, greedy methods,
binary trees and tries.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsakit.sorting` | `three_way_quick_sort`, `bucket_sort`, `in_place_merge_sort`, `intro_sort`, `lsd_radix_sort`, `randomized_quick_sort`, `radix_sort_strings`, `smooth_sort`, `stable_heap_sort`, `tim_sort` |
| `dsakit.external_sort` | `external_merge_sort`, `merge_sorted_files` |
| `dsakit.heaps` | `build_max_heap`, `heap_sort`, `is_valid_min_heap`, `k_largest`, `merge_sorted_lists` |
| `dsakit.priority_queues` | `MaxHeap`, `MinHeap`, `MedianFinder`, `IndexedMaxPriorityQueue` |
| `dsakit.weighted_graphs` | `Edge`, `DisjointSet`, `bellman_ford`, `dijkstra`, `floyd_warshall`, `kruskal_mst`, `prim_mst` |
| `dsakit.graphs` | `DirectedGraph`, `bfs_order`, `dfs_order`, `is_bipartite`, `count_connected_components`, `has_cycle_directed`, `has_cycle_undirected`, `path_exists`, `unweighted_distances`, `topological_sort_dfs`, `topological_sort_kahn`, `kosaraju_scc` |
| `dsakit.greedy` | `activity_selection`, `min_arrows`, `fractional_knapsack`, `gas_station_start`, `huffman_codes`, `interval_point_cover`, `job_sequencing`, `kruskal_total_weight`, `min_platforms`, `optimal_merge_cost`, `prim_total_weight`, `greedy_set_cover` |
| `dsakit.greedy_cli` | `main`, the entry point of the `dsakit-greedy` command |
| `dsakit.trees` | `TreeNode`, `count_leaves`, `height`, `diameter`, `level_order`, `preorder`, `lowest_common_ancestor`, `serialize`, `deserialize`, `size` |
| `dsakit.bst` | `bst_insert`, `bst_search`, `bst_min`, `bst_max`, `bst_delete` |
| `dsakit.tries` | `Trie`, `WordDictionary`, `longest_common_prefix` |
| `dsakit.word_search` | `find_words` |

### Conventions

- The sorting functions take any iterable and return a new sorted list;
  the input is left untouched. `bucket_sort` accepts only values in
  `[0, 1)` and `lsd_radix_sort` only signed 32-bit integers (negative
  numbers sort after non-negative ones, by their bit pattern); both raise
  `ValueError` otherwise.
- Graphs are adjacency lists indexed by vertex number: `adjacency[v]`
  holds the neighbours of `v`, and an undirected graph lists each edge in
  both directions. Weighted adjacency lists hold `(neighbor, weight)`
  pairs. Unreachable distances are `math.inf` in `dsakit.weighted_graphs`
  and `None` in `unweighted_distances`.
- `bellman_ford` raises `ValueError` on a negative cycle reachable from
  the source; `prim_mst` and `prim_total_weight` raise it for a graph that
  is not connected.
- Empty heaps raise `IndexError` on `pop`; `MedianFinder.median` raises
  `ValueError` before any number was added.
- Binary search trees are built from `dsakit.trees.TreeNode` nodes.

## Examples

Priority queues:

```python
from dsakit.priority_queues import MinHeap, MedianFinder

heap = MinHeap()
for value in [4, 2, 9, 1, 6, 7]:
    heap.push(value)
while len(heap):
    print(heap.pop())        # 1 2 4 6 7 9

finder = MedianFinder()
for num in [5, 15, 1, 3]:
    finder.add(num)
print(finder.median())       # 4.0
```

Tries:

```python
from dsakit.tries import Trie, WordDictionary

trie = Trie()
for word in ["apple", "app", "apt", "banana", "band", "bandana"]:
    trie.insert(word)

trie.contains("app")         # True
trie.starts_with("ban")      # True
trie.autocomplete("ban")     # ['banana', 'band', 'bandana']

words = WordDictionary()
for word in ["bad", "dad", "mad"]:
    words.add_word(word)
words.search(".ad")          # True
words.search("pad")          # False
```

Graphs:

```python
from dsakit.graphs import topological_sort_kahn

adjacency = [[], [], [3], [1], [0, 1], [2, 0]]
topological_sort_kahn(adjacency)   # [4, 5, 2, 0, 3, 1]
```

External sorting of a file of whitespace-separated integers, holding at
most `chunk_size` values in memory; sorted runs go to a temporary
directory that is removed afterwards, and the number of runs is returned:

```python
from dsakit.external_sort import external_merge_sort

external_merge_sort("input.txt", "output.txt", chunk_size=1000)
```

## Command line

`dsakit-greedy` reads a problem as whitespace-separated integers from
standard input and prints the answer. It has three subcommands:

- `activities`: `n`, then `n` pairs `start finish`; prints how many
  non-overlapping activities can be chosen.
- `knapsack`: `n`, then `n` pairs `weight value`, then the capacity;
  prints the best fractional-knapsack value with two decimals.
- `set-cover`: the universe size, the number of sets, then each set as
  `k x1 .. xk`; prints how many sets were chosen and their indices.

```
$ printf '3\n1 2\n3 4\n0 6\n' | dsakit-greedy activities
2
$ printf '3\n10 60\n20 100\n30 120\n50\n' | dsakit-greedy knapsack
240.00
```

Malformed or incomplete input is reported on standard error with exit
status 1. Run `dsakit-greedy --help` for a summary.

## What it does not do

Only those three greedy problems have a command. Everything else, the
other greedy algorithms included, is available as a library function and
not from the command line.