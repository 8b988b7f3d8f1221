# dsakit

Classic data structures and algorithms in plain Python, with no third-party
dependencies, plus a small interactive menu for trying some of them from a
terminal.

Python 3.10 or newer is required.

## Modules

| Module              | Contents                                                                 |
|---------------------|--------------------------------------------------------------------------|
| `dsakit.sorting`    | bubble, insertion, selection and quick sort; pass-by-pass variants; `partition` |
| `dsakit.arrays`     | appending, binary search, substring search, reversal, string sorting, sparse-matrix triplets, polynomial addition and formatting |
| `dsakit.postfix`    | `evaluate_postfix` and `PostfixError`                                    |
| `dsakit.bst`        | `BinarySearchTree` with in-, pre- and post-order traversal               |
| `dsakit.linkedlist` | `SinglyLinkedList` and `DoublyLinkedList`                                |
| `dsakit.containers` | `Stack` and `Queue`, optionally bounded, with `ContainerOverflow` and `ContainerUnderflow` |
| `dsakit.cli`        | the `dsakit` command                                                     |

## Sorting

Every sort returns a new list and leaves its input untouched.

```python
from dsakit.sorting import bubble_sort_passes, insertion_sort, quicksort

quicksort([10, 7, 8, 9, 1, 5])      # [1, 5, 7, 8, 9, 10]
insertion_sort([3, 1, 2])           # [1, 2, 3]

# The list as it stands after each pass.
for state in bubble_sort_passes([3, 1, 2]):
    print(state)
```

`bubble_sort`, `selection_sort` and the `*_passes` generators for bubble,
insertion and selection sort work the same way. `partition(items, low, high)`
performs one Lomuto partition of `items[low:high + 1]` in place around
`items[high]` and returns the pivot's final index.

## Arrays and strings

```python
from dsakit import arrays

arrays.append_arrays([1, 2], [3])            # [1, 2, 3]
arrays.binary_search([1, 3, 5, 7], 5)        # 2 (None when absent)
arrays.find_pattern("hello world", "wor")    # 6 (None when absent)
arrays.reverse_string("abc")                 # "cba"
arrays.sort_strings(["pear", "apple"])       # ["apple", "pear"]

matrix = [[0, 5], [7, 0]]
arrays.to_triplets(matrix)                   # [(0, 1, 5), (1, 0, 7)]
print(arrays.format_matrix(matrix))

# Coefficients are indexed by power: [c0, c1, c2, ...]
total = arrays.add_polynomials([1, 2], [0, 0, 3])   # [1, 2, 3]
arrays.format_polynomial(total)              # "3x^2 + 2x^1 + 1 = 0"
```

## Postfix expressions

Operands are single digits or single letters; letters are looked up in the
`variables` mapping, and whitespace is ignored. The operators are
`+ - * / % ^`; division and remainder truncate toward zero.

```python
from dsakit.postfix import evaluate_postfix, PostfixError

evaluate_postfix("23+")                      # 5
evaluate_postfix("ab*", {"a": 4, "b": 6})    # 24
```

`PostfixError` (a `ValueError`) is raised for an unknown operator, a missing
variable, too few or too many operands, division by zero, a negative
exponent, or an empty expression.

## Binary search tree

Values equal to a node go into its right subtree.

```python
from dsakit.bst import BinarySearchTree

tree = BinarySearchTree([50, 30, 70, 20, 40])
tree.insert(60)

40 in tree                     # True
len(tree)                      # 6
list(tree.inorder())           # [20, 30, 40, 50, 60, 70]; also list(tree)
list(tree.preorder())          # [50, 30, 20, 40, 70, 60]
list(tree.postorder())         # [20, 40, 30, 60, 70, 50]
```

## Linked lists

```python
from dsakit.linkedlist import SinglyLinkedList, DoublyLinkedList

items = SinglyLinkedList([4, 2, 9, 2])
items.append(1)
items.positions(2)             # [2, 4]  (1-based)
items.remove(9)                # ValueError if the value is absent
items.sort()
str(items)                     # "1->2->2->4->NULL"

chain = DoublyLinkedList([1, 2, 3])
list(reversed(chain))          # [3, 2, 1]
chain.format_forward()         # "1 ->2 ->3 ->NULL"
chain.format_backward()        # "NULL<-3<-2<-1"
```

## Stacks and queues

A `capacity` of `None` (the default) means unbounded; a negative capacity
raises `ValueError`.

```python
from dsakit.containers import Stack, Queue, ContainerOverflow, ContainerUnderflow

stack = Stack(capacity=2)
stack.push(1)
stack.push(2)
try:
    stack.push(3)
except ContainerOverflow:
    print("stack is full")
list(stack)                    # [2, 1]  (top first)
stack.pop()                    # 2

queue = Queue()
queue.enqueue("a")
queue.enqueue("b")
queue.dequeue()                # "a"
```

Popping an empty stack or dequeuing an empty queue raises
`ContainerUnderflow` (an `IndexError`); `ContainerOverflow` is an
`OverflowError`.

## Command line

`dsakit` runs a numbered menu for one structure, reading integers from
standard input:

```
dsakit bst      # 1.insert  2.inorder  3.exit
dsakit list     # 1.create  2.insert  3.display  4.exit
dsakit stack    # asks for a size, then 1.push  2.pop  3.display  4.exit
dsakit queue    # asks for a size, then 1.enqueue  2.dequeue  3.display  4.exit
```

The session ends at the exit choice or at end of input. Input that is not an
integer ends it with an error message and exit status 1.

## What it does not do

- The menus cover only the operations listed above; searching, deletion,
  sorting and the other traversals are available from Python, not from the
  command.
- Nothing is saved: every structure lives in memory and is lost when the
  session or program ends.
- The trees are not self-balancing, and the lists are not thread-safe.

## Running the tests

```
pip install "dsakit[test]"
pytest
```