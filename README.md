# dsakit

Plain, readable implementations of the data structures and algorithms
covered in a first course: singly and doubly linked lists, stacks,
queues, binary heaps, binary trees, sorting and the Tower of Hanoi.
Everything is pure Python with no runtime dependencies. Python 3.10 or
later is required.

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

| Module                  | Contents |
|-------------------------|----------|
| `dsakit.singly_linked`  | `Node`; `from_list`, `to_list`, `length`, `format_list`, `append`, `prepend`, `reverse` (iterative), `reverse_recursive`, `find_middle`, `find_middle_by_count`, `delete_middle`, `has_cycle` |
| `dsakit.doubly_linked`  | `DNode`; `from_list`, `to_list`, `delete_head`, `delete_tail`, `delete_kth`, `insert_before_head`, `insert_before_tail`, `insert_before_kth`, `insert_before_node`, `reverse` |
| `dsakit.stack`          | `LinkedStack`, `search_stack`, and the exceptions `StackError`, `StackEmptyError`, `StackOverflowError` |
| `dsakit.queues`         | `CircularQueue`, `LinkedQueue`, `PriorityQueue`, and the exceptions `QueueUnderflowError`, `QueueFullError` |
| `dsakit.heaps`          | `push_min`, `push_max`, `build_min_heap`, `build_max_heap` on heaps kept in plain lists |
| `dsakit.sorting`        | `merge_sort`, `quick_sort`, `bubble_sort`, and the traced `merge_sort_steps` and `quick_sort_steps` |
| `dsakit.trees`          | `TreeNode`; `bst_insert`, `build_bst`, `level_insert`, `build_level_order`, `read_preorder`, and the traversals `preorder`, `inorder`, `postorder` |
| `dsakit.hanoi`          | `Move`, `hanoi_moves`, `solve_hanoi` |
| `dsakit.cli`            | `main`, the `dsakit` command |

## Linked lists

Lists are chains of nodes. The functions take a head node (or `None` for
an empty list) and return the head of the result.

```python
from dsakit import singly_linked

head = singly_linked.from_list([1, 2, 3, 4])
print(singly_linked.length(head))                            # 4
print(singly_linked.find_middle(head).data)                  # 3
print(singly_linked.to_list(singly_linked.reverse(head)))    # [4, 3, 2, 1]
```

- `find_middle` uses slow and fast pointers; `find_middle_by_count`
  counts the nodes first. With an even number of nodes both return the
  second of the two middle nodes.
- `delete_middle` removes the first node whose value equals the middle
  node's value.
- `has_cycle` tells whether following `next` from the head ever loops.
- `format_list` renders the values each followed by a space.
- Nodes are iterable: `list(head)` gives the values from that node on.

In `dsakit.doubly_linked`, positions for `delete_kth` and
`insert_before_kth` count from 1 and raise `IndexError` when out of
range. `insert_before_node` returns the new node and raises `ValueError`
if it is given the head; use `insert_before_head` for that. Deleting the
head or tail of a one-node list gives `None`.

## Stacks and queues

Stacks and queues behave like Python containers (`len()` and iteration)
and raise exceptions rather than returning sentinel values.

```python
from dsakit.stack import LinkedStack
from dsakit.queues import PriorityQueue

stack = LinkedStack([1, 2, 3])
stack.push(4)
print(stack.pop())          # 4
print(list(stack))          # [3, 2, 1]  (top to bottom)

pq = PriorityQueue()
pq.enqueue("alice", 2)
pq.enqueue("bob", 1)
print(pq.dequeue())         # bob
```

- `LinkedStack.pop` and `LinkedStack.top` raise `StackEmptyError` on an
  empty stack.
- `search_stack(values, target, limit=30)` tells whether `target` is
  among `values`; it raises `StackEmptyError` for no values and
  `StackOverflowError` for more than `limit`.
- `CircularQueue(capacity=100)` holds at most `capacity` values;
  `enqueue` on a full queue raises `QueueFullError`, and `dequeue` or
  `front` on an empty one raise `QueueUnderflowError`. It also has
  `is_empty` and `is_full`.
- `LinkedQueue` is unbounded.
- `PriorityQueue` serves the lowest priority number first; entries with
  equal priority keep their arrival order.

## Heaps

```python
from dsakit.heaps import build_min_heap, push_max

print(build_min_heap([5, 3, 8, 1]))   # [1, 3, 8, 5]

heap = []
for value in [5, 3, 8, 1]:
    push_max(heap, value)
print(heap)                           # [8, 3, 5, 1]
```

The heaps are built by inserting values one after another and sifting
each one up.

## Sorting

Each sort takes any iterable and returns a new sorted list.

```python
from dsakit.sorting import merge_sort, quick_sort, bubble_sort, merge_sort_steps

print(merge_sort([13, 46, 24, 52, 20, 9]))   # [9, 13, 20, 24, 46, 52]
print(bubble_sort([13, 46, 24, 52, 20, 9]))  # [9, 13, 20, 24, 46, 52]

for step in merge_sort_steps([3, 1, 2]):
    print(step)
```

`merge_sort_steps` yields a copy of the whole list after every merge.
`quick_sort` takes the first element of each range as its pivot;
`quick_sort_steps` uses the last element as pivot and yields a copy of
the whole list after every partition. Both work on strings as well as
numbers.

## Binary trees

```python
from dsakit.trees import build_bst, build_level_order, read_preorder, inorder, preorder

root = build_bst([50, 30, 70, 20, 40])
print(inorder(root))                    # [20, 30, 40, 50, 70]

print(preorder(build_level_order([1, 2, 3, 4])))   # [1, 2, 4, 3]

tree = read_preorder("1 2 -1 -1 3 -1 -1".split())
print(inorder(tree))                    # [2, 1, 3]
```

- `bst_insert` sends equal values to the right.
- `level_insert` fills the first free child slot in level order.
- `read_preorder` reads integers in preorder, with `-1` marking a
  missing child, and raises `ValueError` if the input ends too early.
- The traversals return lists of values.

## Tower of Hanoi

```python
from dsakit.hanoi import solve_hanoi

moves = solve_hanoi(2)
for move in moves:
    print(move)
print(len(moves))
# move disk 1 from rod 1 to rod 2
# move disk 2 from rod 1 to rod 3
# move disk 1 from rod 2 to rod 3
# 3
```

`hanoi_moves` yields the same `Move` objects lazily. Rods default to
`"1"`, `"2"` and `"3"`; fewer than one disk raises `ValueError`.

## Command line

Installing the package provides a `dsakit` command with two
subcommands.

```
dsakit length 4 8 15 16
```

builds a linked list from the values and prints it and its length:

```
Created Linked list: 4 8 15 16 
Length of Linked List: 4
```

With no values on the command line, it reads a count followed by that
many integers from standard input.

```
dsakit hanoi 3
```

prints every move for three disks and then the number of moves. With no
argument, the number of disks is read from standard input.

Invalid input prints an error to standard error and exits with status 1.
Run `dsakit --help` for details.

The command line only covers these two demonstrations; the other data
structures and algorithms are used from Python.