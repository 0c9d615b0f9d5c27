# dsdrills

Classic data-structure and algorithm drills in plain Python, with no
third-party dependencies.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Containers

All containers have a fixed capacity. Adding to a full container raises
`dsdrills.stack.FullError` (a subclass of `OverflowError`); taking from an
empty one raises `dsdrills.stack.EmptyError` (a subclass of `IndexError`).
A negative capacity raises `ValueError`. Searches return an index, or `None`
when the value is absent.

- `dsdrills.stack.IntStack` – `push`, `pop`, `peek`, `clear`, `capacity()`,
  `len()`, `is_empty`, `is_full`, `search` (index from the bottom of the
  topmost match), iteration from bottom to top, and `str()` giving the
  elements separated by spaces.
- `dsdrills.double_stack.SharedStack` – two stacks, `Side.A` and `Side.B`,
  growing towards each other inside one array. Each operation takes the side:
  `push(side, x)`, `pop(side)`, `peek(side)`, `clear(side)`, `size(side)`,
  `is_empty(side)`, `search(side, x)`, `items(side)` and `format(side)`;
  `capacity()` and `is_full()` cover the whole array.
- `dsdrills.ring_queue.IntQueue` – a ring-buffer queue with `enqueue`,
  `dequeue`, `peek`, `clear`, `search` (array index) and `search_logical`
  (places behind the front).
- `dsdrills.array_queue.ArrayIntQueue` – a queue that keeps its front at
  index 0 and shifts the rest on every `dequeue`.
- `dsdrills.ring_deque.IntDeque` – a ring-buffer double-ended queue with
  `enqueue_front`, `enqueue_rear`, `dequeue_front`, `dequeue_rear`,
  `peek_front`, `peek_rear`, `search` and `search_logical`.
- `dsdrills.array_containers` – `BaseArray` (fixed slots with `put`, `get`
  and `capacity()`, raising `IndexError` outside the range), and the
  `ArrayQueue` and `ArrayStack` built on it.

```python
from dsdrills.stack import IntStack

s = IntStack(4)
s.push(1)
s.push(2)
print(len(s), s.peek())   # 2 2
print(s.pop())            # 2
print(str(s))             # 1
```

```python
from dsdrills.ring_deque import IntDeque

d = IntDeque(8)
d.enqueue_rear(1)
d.enqueue_front(0)
print(list(d))            # [0, 1]
```

## Algorithms

- `dsdrills.recursion` – `factorial(n)`, `gcd(x, y)`, `gcd_array(values)`,
  `recur3(n)` (returns the numbers the recursive routine would print, found
  with an explicit stack), `eight_queens()` (every placement as a tuple of
  rows, one per column) and `format_queens(positions)`.
- `dsdrills.sorting` – `bubble_sort(a)`, a stack-driven `quick_sort(a, out)`
  and `heap_sort(a, out)`, all sorting in place. When a text stream is passed
  as `out`, the quick sort writes each pushed and split range, and the heap
  sort draws the heap with `format_heap` before each sift-down.
- `dsdrills.text.rfind_char(s, c)` – index of the last `c` in `s`, or `None`.
- `dsdrills.polynomial` – `Polynomial` made of `Term(coef, expo)` values;
  `+` merges two polynomials whose exponents are listed in descending order,
  and `str()` gives terms such as `4.0x^3 + 3.0x^2`.
- `dsdrills.matrix` – `sequential_matrix`, `add_matrices`,
  `multiply_matrices` and `format_matrix` for lists of rows.

## Small object models

- `dsdrills.operators` – `Rect`, `Power` (with `+`, `-` and `add_power`),
  `Point2D` (with `+`) and `Complex`, which is built as `Complex(im, re)` and
  supports `+`, `-`, `*`, `/`, `add_complex` and `str()` such as
  `4 + j6`.
- `dsdrills.book.Book` – `+=` and `-=` change the price; `==` compares with a
  price, a title or another book (title and page count); a book with price 0
  is falsy.
- `dsdrills.inheritance` – `Point`, `ColorPoint`, `Circle`, `NamedCircle`
  and `largest_circle(circles)`.
- `dsdrills.ram.Ram` – 100 KB of signed byte cells with `read`, `write` and
  `len()`; addresses outside the memory raise `IndexError`.
- `dsdrills.references` – `average`, `bigger` (`None` when equal),
  `find_char` and `add_sub`.

## Interactive menus

Each container comes with a numbered text menu that reads integers from
standard input and writes to standard output:

```
dsdrills-stack
dsdrills-shared-stack
dsdrills-queue
dsdrills-array-queue
dsdrills-deque
```

Every menu starts with a capacity of 64 and exits when you enter `0` or the
input ends. Input that is not an integer stops the menu with exit status 1.
The same menus can be driven from any pair of text streams with
`dsdrills.menus.run_stack_menu`, `run_shared_stack_menu`, `run_queue_menu`,
`run_array_queue_menu` and `run_deque_menu`, each taking the container, an
input stream and an output stream.

The menus are the only commands; the sorting, recursion and other drills are
used from Python code.