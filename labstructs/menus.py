"""Interactive text menus driving the data structures from standard input."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from typing import Callable, Deque, Dict, Optional, Sequence, TextIO

from labstructs.bst import BinarySearchTree
from labstructs.graph import Graph
from labstructs.linkedlist import Item, LinkedList
from labstructs.priority_queue import (
    MinPriorityQueue,
    PriorityQueueEmptyError,
    PriorityQueueFullError,
)
from labstructs.queue import Queue
from labstructs.stack import Stack

ITEM_HEADER = "\t#*****  *****#"
KEY_LINE = "\t--- Key {}"
VALUE_LINE = "\t--- value: {}"
IDENT_LINE = "\t--- ID: {}"
SEPARATOR = "\t***************"

INVALID_CHOICE = "Invalid choice"
INVALID_INPUT = "Invalid input"
INT_KEY_PROMPT = "Insert integer code"
STRING_KEY_PROMPT = "Insert string code: at most 15 characters"
VALUE_PROMPT = "\t Insert the integer value"
IDENT_PROMPT = "\t Insert the non-negative integer ID"

ELEMENT_FOUND = "   **** Element found ***** "
ELEMENT_ABSENT = "\t Element absent "
NODE_DELETED = "\t\tNode found and deleted"
NODE_ABSENT = "\t\tNode absent"
LIST_EMPTY = "\t print_list: the list is empty"

QUEUE_NOT_CREATED = "Create the queue first"
QUEUE_EMPTY = "Queue empty"
QUEUE_HEAD = "element at the head"
QUEUE_TAIL = "\telement at the tail: "
QUEUE_DEQUEUED = "\t extracted element: "
QUEUE_SIZE = "\nThe queue holds {} elements"

STACK_NOT_CREATED = "\t Stack to be created "
STACK_UNAVAILABLE = "\t Cannot access the stack "
STACK_MISSING = "Stack not yet created"

TREE_NOT_CREATED = "\t Create the tree first"
TREE_EMPTY = "Empty tree"
KEY_ABSENT = "Key not present"
KEY_FOUND_DELETE = "key found in the following node:"
KEY_FOUND = "Key present in the following node:"
MIN_KEY = "Minimum key: "
MAX_KEY = "Maximum key: "
DELETE_KEY_PROMPT = "insert the key to delete"
SEARCH_KEY_PROMPT = "insert the key to search"

PQ_NOT_CREATED = "Create the queue first"
PQ_SIZE_PROMPT = "Insert the size:"
PQ_INSERTED = "Insertion successful"
PQ_FULL = "Insert:\tqueue not created or capacity exhausted"
PQ_EMPTY = "ExtractMin:\tqueue empty or not created"
PQ_MINIMUM = "Element with minimum priority :"
PQ_EXTRACTED = "Element with minimum priority removed:"
PQ_COUNT = "elements in the queue: {} "

GRAPH_DESTROYED = "Graph already destroyed"
NODE_MISSING = "One or both nodes do not exist"
NO_SUCH_NODE = "node does not exist"
EDGE_ADDED = "\tOperation successful!"
EDGE_MISSING = "Edge not present"
EDGE_COUNT = "Number of edges in the graph: {}"
VERTEX_COUNT = "Number of vertices in the graph: {}"

LIST_MENU = """
Choose an operation:
--------------------------------------------
 --- 0: quit
 --- 1: create empty list
 --- 2: insert element
 --- 3: search element
 --- 4: delete element
 --- 5: print list
 --- 6: delete list
--------------------------------------------"""

QUEUE_MENU = """
Choose an operation:
--------------------------------------------
 --- 0: quit
 --- 1: create empty queue
 --- 2: Enqueue
 --- 3: Head
 --- 4: Dequeue
 --- 5: Tail
 --- 6: Size
 --- 7: Print queue contents
 --- 8: Destroy queue
--------------------------------------------"""

STACK_MENU = """
Choose an operation:
--------------------------------------------
 --- 0: quit
 --- 1: create empty stack
 --- 2: push
 --- 3: pop
 --- 4: top
 --- 5: delete stack
--------------------------------------------"""

BST_MENU = """
Choose an operation:
--------------------------------------------
 --- 0: quit
 --- 1: Create empty BST
 --- 2: Insert a key
 --- 3: Remove a key
 --- 4: Search a key
 --- 5: Visit the tree
 --- 6: Minimum key
 --- 7: Maximum key
 --- 8: destroy the tree
--------------------------------------------"""

PQ_MENU = """
Choose an operation:
--------------------------------------------
 --- 0: quit
 --- 1: create empty queue
 --- 2: insert element
 --- 3: show element of minimum priority
 --- 4: extract element of minimum priority
 --- 5: number of elements in the queue
 --- 6: print the queue
 --- 7: delete the queue
--------------------------------------------"""

GRAPH_MENU = """
Choose an operation:
--------------------------------------------
 --- 0: quit
 --- 1: print the adjacency list of a node
 --- 2: Add an edge
 --- 3: remove an edge
 --- 4: number of edges
 --- 5: number of vertices
 --- 6: destroy the graph
--------------------------------------------"""


class _Console:
    """Whitespace-separated token reader over a text stream."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream if stream is not None else sys.stdin
        self._pending: Deque[str] = deque()

    def token(self) -> str:
        while not self._pending:
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._pending.extend(line.split())
        return self._pending.popleft()

    def integer(self) -> int:
        token = self.token()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"not an integer: {token!r}") from None


def _loop(console: _Console, text: str, actions: Dict[int, Callable[[], None]]) -> int:
    while True:
        print(text)
        try:
            choice = console.integer()
        except EOFError:
            return 0
        except ValueError:
            print(INVALID_CHOICE)
            continue
        if choice == 0:
            return 0
        action = actions.get(choice)
        if action is None:
            print(INVALID_CHOICE)
            continue
        try:
            action()
        except EOFError:
            return 0
        except ValueError as exc:
            print(f"{INVALID_INPUT}: {exc}")


def _show_key(key: object) -> None:
    print(ITEM_HEADER)
    print(KEY_LINE.format(key))


def _show_key_item(item: Item) -> None:
    _show_key(item.key)


def _show_full_item(item: Item) -> None:
    _show_key(item.key)
    print(VALUE_LINE.format(item.value))
    print(IDENT_LINE.format(item.ident))


def _read_int_key(console: _Console) -> int:
    print(INT_KEY_PROMPT)
    return console.integer()


def _read_int_item(console: _Console) -> Item:
    return Item(_read_int_key(console))


def _read_string_key(console: _Console) -> str:
    print(STRING_KEY_PROMPT)
    return console.token()


def _read_full_item(console: _Console) -> Item:
    key = _read_string_key(console)
    print(VALUE_PROMPT)
    value = console.integer()
    print(IDENT_PROMPT)
    ident = console.integer()
    return Item(key, value, ident)


class _ListMenu:
    def __init__(
        self,
        console: _Console,
        read_item: Callable[[_Console], Item],
        read_key: Callable[[_Console], object],
        show: Callable[[Item], None],
    ) -> None:
        self.console = console
        self.read_item = read_item
        self.read_key = read_key
        self.show = show
        self.items = LinkedList()

    def run(self) -> int:
        return _loop(
            self.console,
            LIST_MENU,
            {
                1: self.create,
                2: self.insert,
                3: self.search,
                4: self.delete,
                5: self.print_all,
                6: self.create,
            },
        )

    def create(self) -> None:
        self.items = LinkedList()

    def insert(self) -> None:
        self.items.insert(self.read_item(self.console))

    def search(self) -> None:
        found = self.items.search(self.read_key(self.console))
        if found is None:
            print(ELEMENT_ABSENT)
        else:
            print(ELEMENT_FOUND)
            self.show(found)

    def delete(self) -> None:
        key = self.read_key(self.console)
        if not self.items:
            return
        try:
            self.items.delete(key)
        except KeyError:
            print(NODE_ABSENT)
        else:
            print(NODE_DELETED)

    def print_all(self) -> None:
        if not self.items:
            print(LIST_EMPTY)
            return
        for item in self.items:
            self.show(item)
            print(SEPARATOR)


def list_menu(argv: Optional[Sequence[str]] = None) -> int:
    """Menu over a linked list of integer keys."""
    return _ListMenu(_Console(), _read_int_item, _read_int_key, _show_key_item).run()


def item_list_menu(argv: Optional[Sequence[str]] = None) -> int:
    """Menu over a linked list of string-keyed items with satellite data."""
    return _ListMenu(
        _Console(), _read_full_item, _read_string_key, _show_full_item
    ).run()


class _QueueMenu:
    def __init__(self, console: _Console) -> None:
        self.console = console
        self.queue: Optional[Queue] = None

    def run(self) -> int:
        return _loop(
            self.console,
            QUEUE_MENU,
            {
                1: self.create,
                2: self.enqueue,
                3: self.head,
                4: self.dequeue,
                5: self.tail,
                6: self.size,
                7: self.print_all,
                8: self.destroy,
            },
        )

    def _ready(self) -> Optional[Queue]:
        if self.queue is None:
            print(QUEUE_NOT_CREATED)
            return None
        if self.queue.is_empty():
            print(QUEUE_EMPTY)
            return None
        return self.queue

    def create(self) -> None:
        self.queue = Queue()

    def enqueue(self) -> None:
        if self.queue is None:
            print(QUEUE_NOT_CREATED)
            return
        self.queue.enqueue(_read_int_item(self.console))

    def head(self) -> None:
        queue = self._ready()
        if queue is not None:
            print(QUEUE_HEAD)
            _show_key_item(queue.head())

    def dequeue(self) -> None:
        queue = self._ready()
        if queue is not None:
            print(QUEUE_DEQUEUED)
            _show_key_item(queue.dequeue())

    def tail(self) -> None:
        queue = self._ready()
        if queue is not None:
            print(QUEUE_TAIL)
            _show_key_item(queue.tail())

    def size(self) -> None:
        queue = self._ready()
        if queue is not None:
            print(QUEUE_SIZE.format(len(queue)))

    def print_all(self) -> None:
        if self.queue is None:
            return
        for item in self.queue:
            _show_key_item(item)
            print(SEPARATOR)

    def destroy(self) -> None:
        self.queue = None


def queue_menu(argv: Optional[Sequence[str]] = None) -> int:
    """Menu over a FIFO queue of integer keys."""
    return _QueueMenu(_Console()).run()


class _StackMenu:
    def __init__(self, console: _Console) -> None:
        self.console = console
        self.stack: Optional[Stack] = None

    def run(self) -> int:
        return _loop(
            self.console,
            STACK_MENU,
            {1: self.create, 2: self.push, 3: self.pop, 4: self.top, 5: self.destroy},
        )

    def create(self) -> None:
        self.stack = Stack()

    def push(self) -> None:
        if self.stack is None:
            print(STACK_NOT_CREATED)
            return
        self.stack.push(_read_full_item(self.console))

    def pop(self) -> None:
        if not self.stack:
            print(STACK_UNAVAILABLE)
            return
        _show_full_item(self.stack.pop())

    def top(self) -> None:
        if not self.stack:
            print(STACK_UNAVAILABLE)
            return
        _show_full_item(self.stack.top())

    def destroy(self) -> None:
        if self.stack is None:
            print(STACK_MISSING)
            return
        self.stack = None


def stack_menu(argv: Optional[Sequence[str]] = None) -> int:
    """Menu over a stack of string-keyed items with satellite data."""
    return _StackMenu(_Console()).run()


class _BSTMenu:
    def __init__(self, console: _Console) -> None:
        self.console = console
        self.tree = BinarySearchTree()

    def run(self) -> int:
        return _loop(
            self.console,
            BST_MENU,
            {
                1: self.create,
                2: self.insert,
                3: self.delete,
                4: self.search,
                5: self.visit,
                6: self.minimum,
                7: self.maximum,
                8: self.create,
            },
        )

    def create(self) -> None:
        self.tree = BinarySearchTree()

    def insert(self) -> None:
        self.tree.insert(_read_int_key(self.console))

    def delete(self) -> None:
        if not self.tree:
            print(TREE_NOT_CREATED)
            return
        print(DELETE_KEY_PROMPT)
        node = self.tree.search(_read_int_key(self.console))
        if node is None:
            print(KEY_ABSENT)
            return
        print(KEY_FOUND_DELETE)
        _show_key(node.key)
        self.tree.delete(node)

    def search(self) -> None:
        if not self.tree:
            print(TREE_NOT_CREATED)
            return
        print(SEARCH_KEY_PROMPT)
        node = self.tree.search(_read_int_key(self.console))
        if node is None:
            print(KEY_ABSENT)
        else:
            print(KEY_FOUND)
            _show_key(node.key)

    def visit(self) -> None:
        if not self.tree:
            print(TREE_EMPTY)
            return
        for key in self.tree.inorder():
            _show_key(key)

    def minimum(self) -> None:
        if not self.tree:
            print(TREE_EMPTY)
            return
        print(MIN_KEY)
        _show_key(self.tree.minimum().key)

    def maximum(self) -> None:
        if not self.tree:
            print(TREE_EMPTY)
            return
        print(MAX_KEY)
        _show_key(self.tree.maximum().key)


def bst_menu(argv: Optional[Sequence[str]] = None) -> int:
    """Menu over a binary search tree of integer keys."""
    return _BSTMenu(_Console()).run()


class _PriorityQueueMenu:
    def __init__(self, console: _Console) -> None:
        self.console = console
        self.queue: Optional[MinPriorityQueue] = None

    def run(self) -> int:
        return _loop(
            self.console,
            PQ_MENU,
            {
                1: self.create,
                2: self.insert,
                3: self.minimum,
                4: self.extract,
                5: self.count,
                6: self.print_all,
                7: self.destroy,
            },
        )

    def _require(self) -> Optional[MinPriorityQueue]:
        if self.queue is None:
            print(PQ_NOT_CREATED)
        return self.queue

    def create(self) -> None:
        print(PQ_SIZE_PROMPT)
        self.queue = MinPriorityQueue(self.console.integer())

    def insert(self) -> None:
        queue = self._require()
        if queue is None:
            return
        priority = _read_int_key(self.console)
        try:
            queue.insert(priority)
        except PriorityQueueFullError:
            print(PQ_FULL)
        else:
            print(PQ_INSERTED)

    def minimum(self) -> None:
        queue = self._require()
        if queue:
            print(PQ_MINIMUM)
            _show_key(queue.minimum())

    def extract(self) -> None:
        queue = self._require()
        if queue is None:
            return
        try:
            smallest = queue.extract_min()
        except PriorityQueueEmptyError:
            print(PQ_EMPTY)
        else:
            print(PQ_EXTRACTED)
            _show_key(smallest)

    def count(self) -> None:
        queue = self._require()
        if queue is not None:
            print(PQ_COUNT.format(len(queue)))

    def print_all(self) -> None:
        queue = self._require()
        if queue is not None:
            for priority in queue:
                _show_key(priority)

    def destroy(self) -> None:
        self.queue = None


def priority_queue_menu(argv: Optional[Sequence[str]] = None) -> int:
    """Menu over a bounded min-priority queue."""
    return _PriorityQueueMenu(_Console()).run()


class _GraphMenu:
    def __init__(self, console: _Console, graph: Graph) -> None:
        self.console = console
        self.graph: Optional[Graph] = graph

    def run(self) -> int:
        return _loop(
            self.console,
            GRAPH_MENU,
            {
                1: self.adjacency,
                2: self.add_edge,
                3: self.remove_edge,
                4: self.edges,
                5: self.vertices,
                6: self.destroy,
            },
        )

    def _require(self) -> Optional[Graph]:
        if self.graph is None:
            print(GRAPH_DESTROYED)
        return self.graph

    def adjacency(self) -> None:
        graph = self._require()
        if graph is None:
            return
        print("insert the node")
        node = self.console.integer()
        try:
            neighbours = graph.adjacent(node)
        except IndexError:
            print(NO_SUCH_NODE)
            return
        if not neighbours:
            print(LIST_EMPTY)
        for neighbour in neighbours:
            _show_key(neighbour)
            print(SEPARATOR)

    def _read_pair(self) -> tuple:
        return self.console.integer(), self.console.integer()

    def add_edge(self) -> None:
        graph = self._require()
        if graph is None:
            return
        print("insert the two nodes of the edge")
        v1, v2 = self._read_pair()
        try:
            added = graph.add_edge(v1, v2)
        except IndexError:
            print(NODE_MISSING)
            return
        if added:
            print(EDGE_ADDED)

    def remove_edge(self) -> None:
        graph = self._require()
        if graph is None:
            return
        print("insert the two nodes of the edge to delete")
        v1, v2 = self._read_pair()
        try:
            graph.remove_edge(v1, v2)
        except IndexError:
            print(NODE_MISSING)
        except KeyError:
            print(EDGE_MISSING)

    def edges(self) -> None:
        graph = self._require()
        if graph is not None:
            print(EDGE_COUNT.format(graph.edge_count))

    def vertices(self) -> None:
        graph = self._require()
        if graph is not None:
            print(VERTEX_COUNT.format(graph.vertex_count))

    def destroy(self) -> None:
        self.graph = None


def graph_menu(argv: Optional[Sequence[str]] = None) -> int:
    """Load an undirected graph from a file and edit it through a menu."""
    parser = argparse.ArgumentParser(
        prog="labstructs-graph", description="Edit an undirected graph."
    )
    parser.add_argument("vertices", type=int, help="number of vertices")
    parser.add_argument("file", help="file of 'v1 v2' edge lines")
    args = parser.parse_args(argv)

    try:
        graph = Graph(args.vertices)
        with open(args.file, encoding="utf-8") as stream:
            graph.read_edges(stream)
    except FileNotFoundError:
        print(f"File {args.file} not found", file=sys.stderr)
        return 2
    except (ValueError, IndexError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return _GraphMenu(_Console(), graph).run()