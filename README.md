# dsakit

A small collection of classic data structures and algorithms in plain Python,
with no third-party dependencies, plus a `dsakit` command that offers short
demonstrations and interactive menus.

## Modules

### `dsakit.searching`

- `linear_search(items, key)` returns the index of the first element equal to
  `key`, or `None` if there is none.
- `binary_search(items, key)` searches a sequence sorted in ascending order and
  returns an index of `key`, or `None`.

### `dsakit.sorting`

Each sort takes any iterable and returns a new ascending list; the input is
left untouched.

- `bubble_sort`, `insertion_sort`, `selection_sort`
- `merge_sort` (stable)
- `quick_sort` (last element of each range as the pivot)
- `format_array(items, separator=" ")` renders the items with the separator
  after each one, e.g. `"1 2 3 "`.

### `dsakit.expressions`

- `precedence(symbol)` gives `^` 3, `*` and `/` 2, `+` and `-` 1, anything
  else -1.
- `infix_to_postfix(expression)` converts an infix expression of
  single-character letter or digit operands to postfix. Operators of equal
  precedence, `^` included, are grouped left to right.
- `evaluate_postfix(expression)` evaluates a postfix expression of single
  decimal digits and `+ - * /`; division truncates toward zero.

Malformed input (unknown characters, unbalanced parentheses, missing
operands, leftover values, division by zero) raises `ExpressionError`, a
subclass of `ValueError`.

### `dsakit.linked_list`

- `LinkedList(values=())`: a singly linked list with `append(value)` and
  `delete(key)`, which removes the first matching node and returns whether one
  was found. `str()` gives `"10 -> 30 -> NULL"`.
- `CircularLinkedList(values=())`: `insert_end(value)` and `delete_begin()`,
  which returns the removed value or raises `IndexError` when empty. `str()`
  gives the values separated by spaces.

### `dsakit.stacks`

- `ArrayStack(capacity=100)`: pushing onto a full stack raises
  `StackOverflowError` (an `OverflowError`).
- `LinkedStack()`: unbounded; `str()` gives `"30 -> 20 -> 10 -> NULL"`.

Both offer `push`, `pop` and `peek`; popping or peeking an empty stack raises
`StackUnderflowError` (an `IndexError`). Iteration runs from top to bottom.

### `dsakit.queues`

- `CircularQueue(capacity=5)`: a ring buffer with `is_full`, `is_empty`,
  `enqueue` and `dequeue`.
- `ArrayQueue(capacity)`: a linear queue with `is_empty`, `enqueue`,
  `dequeue` and `front`. Slots freed by `dequeue` are not reused, so it
  accepts at most `capacity` enqueues over its lifetime.

Enqueueing into a full queue raises `QueueOverflowError`; taking from an
empty one raises `QueueUnderflowError`. Iteration runs from front to rear.

A non-positive capacity raises `ValueError` for every bounded container.
All containers support `len()` and iteration.

## Usage

```python
from dsakit.expressions import evaluate_postfix, infix_to_postfix
from dsakit.linked_list import LinkedList
from dsakit.queues import CircularQueue
from dsakit.searching import binary_search
from dsakit.stacks import ArrayStack, StackUnderflowError

infix_to_postfix("a+b*(c^d-e)^(f+g*h)-i")   # "abcd^e-fgh*+^*+i-"
evaluate_postfix("231*+9-")                 # -4

binary_search([10, 20, 30, 40, 50], 30)     # 2

numbers = LinkedList([10, 20, 30])
numbers.delete(20)
print(numbers)                              # 10 -> 30 -> NULL

stack = ArrayStack(3)
stack.push(1)
stack.push(2)
stack.pop()                                 # 2

try:
    ArrayStack(1).pop()
except StackUnderflowError:
    print("nothing to pop")

queue = CircularQueue(5)
queue.enqueue(7)
queue.enqueue(8)
queue.dequeue()                             # 7
```

## Installation

```
pip install dsakit
```

To run the tests:

```
pip install "dsakit[test]"
pytest
```

## Command line

```
dsakit hello            # prints "Hello, World!"
dsakit traverse         # prints "10 20 30 40 50 "
dsakit circular-list    # menu: insert at end, delete from beginning, display
dsakit circular-queue   # menu over a five-slot circular queue
dsakit stack            # menu over a hundred-slot stack: push, pop, peek, display
```

The menus read whitespace-separated integers from standard input, answering
each choice and value prompt in turn. A token that is not an integer is
reported as an invalid choice; the session ends at the exit choice or when
input runs out. The same menus can be driven from code with
`dsakit.cli.run_circular_list_menu`, `run_circular_queue_menu` and
`run_stack_menu`, each taking an input and an output text stream.