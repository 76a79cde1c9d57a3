# cppstart

A few small, self-contained examples of everyday programming building blocks.

## Modules

- `cppstart.shapes`
  - `Color(red=0, green=0, blue=0)`: an RGB colour. Any channel set outside
    0–255 is stored as 0. A colour can be unpacked as `red, green, blue`.
  - `Point(x, y)`: a point with integer coordinates.
  - `Circle(radius, center, color=None)`: `center` is a `Point` or an
    `(x, y)` pair; `color` defaults to black. `area()` uses 3.14 for pi, and
    `describe()` returns a multi-line summary of radius, centre and colour.
  - `Cube(length=0, width=0, height=0)`: sides are stored as floats and
    `volume()` returns their product.
- `cppstart.linked_list`
  - `SingleLinkedList(capacity)` and `DoubleLinkedList(capacity)`: lists of
    integers bounded by a positive capacity (a capacity of 0 or less raises
    `ValueError`). Both support `len()`, iteration, `is_empty()`,
    `is_full()`, `add_first()`, `add_last()`, `remove()`, `find()`,
    `describe()` and `clear()`; `DoubleLinkedList` also supports
    `reversed()`.
  - Adding to a full list raises `ListFullError` (an `OverflowError`);
    removing from an empty list raises `ListEmptyError` (a `LookupError`);
    removing a value that is not present raises `ValueError`.
  - `find(value)` returns the position of the first matching element, or
    `None`.
- `cppstart.binary_search`
  - `binary_search_iterative(nums, target)` and
    `binary_search_recursive(nums, target, low=0, high=None)` search an
    ascending sequence and return the target's index, or -1.
- `cppstart.basics`
  - `User(salary, age, name, gender, code)`: a record with fixed-size text
    fields (name under 20 bytes, code under 3 bytes, gender a single one-byte
    character; otherwise `ValueError`). `struct_size()` gives the size of the
    record in native memory layout and `describe()` a one-line summary.
  - `report()` returns the text of a short printout of a few characters,
    integers, a float and a sample user.

## Installation

```
pip install .
```

Requires Python 3.10 or later and has no runtime dependencies.

## Usage

```python
from cppstart.shapes import Circle, Color, Point
from cppstart.linked_list import SingleLinkedList
from cppstart.binary_search import binary_search_iterative

circle = Circle(2, Point(1, 1), Color(255, 0, 0))
print(circle.area())
print(circle.describe())

items = SingleLinkedList(3)
items.add_last(1)
items.add_last(2)
items.add_first(0)
print(list(items), len(items), items.is_full())

print(binary_search_iterative([1, 4, 5, 9, 10, 12, 15, 18, 20], 10))
```

## Command-line demos

```
cppstart-linked-list [single|double]
cppstart-binary-search [target]
cppstart-basics
```

`cppstart-linked-list` fills a list of capacity 5, removes some values and
adds more, printing the contents after each step (a singly linked list by
default). `cppstart-binary-search` looks up `target` (10 by default) in the
list 1, 4, 5, 9, 10, 12, 15, 18, 20 both ways and prints the index.
`cppstart-basics` prints the text of `report()`.

## Running the tests

```
pip install ".[test]"
pytest
```