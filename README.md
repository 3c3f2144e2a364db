# dsalgo

A small collection of classic data structures and algorithms written in plain
Python, with no dependencies outside the standard library. It is a library
only: it has no command-line program.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsalgo.strings` | `split`, `strings_to_int`, `strings_to_float` |
| `dsalgo.timing` | `TicToc`, a stopwatch that reports milliseconds |
| `dsalgo.stack` | `Stack`, `Element`, `evaluate_expression`, `eliminate_binary`, `eliminate_adjacent`, `ExpressionError` |
| `dsalgo.single_list` | `SingleList`, `Node` |
| `dsalgo.list_apps` | `has_cycle`, `lru_access`, `is_palindrome`, `is_palindrome_recursive` |
| `dsalgo.recursion` | `which_row`, `climb_stairs`, `final_recommender`, `DepthLimitError`, `CycleError` |
| `dsalgo.binary_search_tree` | `BinarySearchTree`, `TreeNode`, `HeightMethod` |
| `dsalgo.skip_list` | `SkipList`, `SkipNode` |

## Examples

Splitting a string on a set of separator characters:

```python
from dsalgo.strings import split, strings_to_int

pieces = split("1,2,3_44-55", ",_ -")  # ['1', '2', '3', '44', '55']
strings_to_int(pieces)                 # [1, 2, 3, 44, 55]
split("3+4", "+", True)                # ['3', '+', '4']
```

Evaluating an arithmetic expression with two stacks:

```python
from dsalgo.stack import evaluate_expression

priorities = {"+": 0, "-": 0, "*": 1, "/": 1}
evaluate_expression("34+13*9+44-12/3", "+-*/", priorities)  # 191.0
```

Cancelling adjacent unequal items:

```python
from dsalgo.stack import Element, eliminate_adjacent, eliminate_binary

eliminate_binary("10")                                          # 0
eliminate_adjacent([Element("1")] * 40 + [Element("0")] * 2)    # 38
```

A singly linked list:

```python
from dsalgo.single_list import SingleList

numbers = SingleList([0, 1, 2, 3, 4])
numbers.reverse()
list(numbers)                # [4, 3, 2, 1, 0]
numbers.middle_node().data   # 2
```

A singly linked list used as an LRU cache:

```python
from dsalgo.single_list import SingleList
from dsalgo.list_apps import lru_access

cache = SingleList()
for key in [1, 2, 3, 1, 4]:
    lru_access(cache, key, 3)
list(cache)  # [4, 1, 3]
```

Recursion examples:

```python
from dsalgo.recursion import climb_stairs, which_row, final_recommender, CycleError

climb_stairs(7)   # 21
which_row(5)      # 5
final_recommender({"A": "B", "B": "C"}, "A")  # 'C'
```

A binary search tree:

```python
from dsalgo.binary_search_tree import BinarySearchTree

tree = BinarySearchTree([33, 16, 50, 13, 18])
tree.inorder()  # [13, 16, 18, 33, 50]
18 in tree      # True
tree.height()   # 2
```

A skip list:

```python
from dsalgo.skip_list import SkipList

skip = SkipList([5, 4, 3, 2, 1])
skip.insert(9)
list(skip)  # [1, 2, 3, 4, 5, 9]
skip.delete(5)
5 in skip   # False
```

## Errors

Operations that cannot go ahead raise exceptions. Popping an empty `Stack`
raises `IndexError`, a malformed expression raises `ExpressionError`, a
recommender table that loops raises `CycleError`, and a chain longer than the
allowed depth raises `DepthLimitError`.

## What it does not include

The package has no queue types and no collection of sorting algorithms; use
`collections.deque` and the built-in `sorted` for those.