# labstructs

Small, readable implementations of classic data structures and a few
algorithm exercises, with interactive text menus that drive them from the
terminal. Pure Python, no dependencies.

## What is inside

| Module | Provides |
| --- | --- |
| `labstructs.linkedlist` | `Item`, `LinkedList`: singly linked list with insertion at the head, search and delete by key |
| `labstructs.queue` | `Queue`, `QueueEmptyError`: FIFO queue with `head` and `tail` access |
| `labstructs.stack` | `Stack`, `StackEmptyError`: LIFO stack with `push`, `pop`, `top` |
| `labstructs.bst` | `Node`, `BinarySearchTree`: insert, search, minimum, maximum, predecessor, delete, in-order visit |
| `labstructs.priority_queue` | `MinPriorityQueue` with a fixed capacity, `PriorityQueueEmptyError`, `PriorityQueueFullError` |
| `labstructs.graph` | `Graph`: undirected graph on adjacency lists; `parse_edges` |
| `labstructs.bfs` | `bfs`, `BFSResult`, `Color`: breadth-first search with distances, BFS-tree parents and visit order |
| `labstructs.sorting` | four bubble-sort variants that count comparisons; `compare_variants`, `VariantStats` |
| `labstructs.turnstile` | `min_people`, `solve_cases`: fewest people consistent with a turnstile log |
| `labstructs.students` | `ExamRecord`, `find_student` |
| `labstructs.vowels` | `strip_vowels`, `copy_without_vowels` |
| `labstructs.menus` | interactive numbered menus for each structure |

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from labstructs.linkedlist import Item, LinkedList
from labstructs.queue import Queue
from labstructs.stack import Stack
from labstructs.bst import BinarySearchTree
from labstructs.priority_queue import MinPriorityQueue
from labstructs.graph import Graph
from labstructs.bfs import bfs
from labstructs.sorting import bubble_sort_optimized
from labstructs.turnstile import min_people
from labstructs.vowels import strip_vowels

items = LinkedList()
items.insert(Item("alpha", value=1, ident=7))
items.insert(Item("beta"))
[item.key for item in items]   # ["beta", "alpha"]: newest first
items.delete("alpha")          # returns the item; KeyError if absent

queue = Queue()
queue.enqueue(1)
queue.enqueue(2)
queue.dequeue()                # 1

stack = Stack()
stack.push("a")
stack.push("b")
stack.pop()                    # "b"

tree = BinarySearchTree()
for key in (5, 3, 8, 1):
    tree.insert(key)
list(tree)                     # [1, 3, 5, 8]
tree.delete(tree.search(3))

heap = MinPriorityQueue(10)
for priority in (7, 2, 9):
    heap.insert(priority)
heap.extract_min()             # 2

graph = Graph(4)
graph.add_edge(0, 1)           # True; False if the edge already exists
graph.add_edge(1, 2)
result = bfs(graph, 0)
result.distances               # (0, 1, 2, None): None means unreachable

bubble_sort_optimized([3, 1, 2])   # ([1, 2, 3], comparisons)
min_people([1, -1])            # 1
strip_vowels("ciao mondo")     # "c mnd"
```

Notes on behaviour:

- `Item` keys are integers or strings; string keys longer than 15
  characters and negative `ident` values raise `ValueError`.
- Taking from an empty `Queue`, `Stack` or `MinPriorityQueue` raises the
  matching `...EmptyError`; inserting into a full `MinPriorityQueue` raises
  `PriorityQueueFullError`; `decrease_key` with a larger priority raises
  `ValueError`.
- In `BinarySearchTree`, equal keys go to the left subtree; deleting a node
  with two children copies its predecessor's key into it.
- `Graph` raises `IndexError` for a vertex outside `0 .. vertices - 1` and
  `KeyError` when removing an edge that is not there. Adjacency lists keep
  the most recently added neighbour first, which fixes the BFS visit order.

## Commands

- `labstructs-bfs VERTICES FILE`: reads an undirected graph from an edge
  file of `v1 v2` pairs and prints the edge count, the BFS-tree parent of
  every vertex (`-1` for none) and its distance from vertex 0 (`inf` if
  unreachable).
- `labstructs-sorting SIZE VERBOSITY REPETITIONS [--seed N]`: sorts random
  arrays of values 0..99 with each bubble-sort variant and prints the mean
  time, the mean number of comparisons and the comparisons saved against
  the plain variant. A non-zero verbosity prints every array. Sizes above
  250000 are refused.
- `labstructs-turnstile [INPUT] [OUTPUT]`: reads cases from `INPUT`
  (default `input.txt`) and writes one `Case #n: answer` line per case to
  `OUTPUT` (default `output.txt`).
- `labstructs-students`: interactive register of exam results, kept in
  memory, with search by name and surname.
- `labstructs-vowels [SOURCE] [TARGET]`: copies a text file dropping the
  lower-case vowels; asks for the file names if they are not given.
- `labstructs-list-menu`, `labstructs-item-list-menu`,
  `labstructs-queue-menu`, `labstructs-stack-menu`, `labstructs-bst-menu`,
  `labstructs-priority-queue-menu`: numbered menus on standard input for
  each structure.
- `labstructs-graph-menu VERTICES FILE`: loads a graph from an edge file and
  lets you list adjacencies, add and remove edges and count edges and
  vertices.

## What it does not do

All data lives in memory. The menus and the student register do not save
anything between runs, and the trees are not balanced.