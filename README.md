# autolab

A handful of small, self-contained tools with no dependencies beyond the
standard library.

- **`autolab.calculator`**: a `Calculator` working on `int` or `float`.
  It has `add`, `subtract`, `multiply`, `divide`, `square`, `exp` and `mod`.
  With `int`, division and modulus round toward zero. Dividing by zero or
  taking a modulus of zero raises `ValueError`.
- **`autolab.matrix`**: a `Matrix` class with element-wise (`*`) and scalar
  (`+`, `-`) arithmetic, negation, `Matrix.add`, `Matrix.subtract`,
  matrix multiplication with `Matrix.dot`, `determinant`, `trace`, `minor`,
  `transpose`, `inverse`, `magnitude` and `normalize`. It is built with
  `Matrix(rows, cols, fill)`, `Matrix.zeroes`, `Matrix.ones`,
  `Matrix.identity`, `Matrix.from_rows` or `Matrix.from_vector`.
  Mismatched shapes, non-square matrices where a square one is needed, and
  singular matrices passed to `inverse` raise `ValueError`.
- **`autolab.points`**: a frozen `Point3D` dataclass with `distance`,
  `zero_distance`, `compare` (farther from the origin), the octant a point
  lies in (`region`, returning a `Region`; `Region.NONE` for points on an
  axis plane), `in_same_region` and `format_region`.
- **Menu bot** (`autolab.menu`, `autolab.interface`, `autolab.user`,
  `autolab.cli`): a restaurant menu assistant. It loads the available dishes
  from a JSON file, lets you build your own menu, and suggests a single dish
  or a full menu (one dish of each type) closest to a taste balance you give.
  Before the menu is approved it asks about extras, such as a salad topping
  or chocolate on the dessert, and adds their cost to the bill.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command-line tools

```
autolab-calculator    # interactive calculator on standard input
autolab-matrix        # prints a demonstration of the matrix operations
autolab-points        # prints a demonstration of the 3D point helpers
autolab-menubot       # interactive restaurant menu bot
```

The calculator first asks for the number type (1 int, 2 float, 3 double),
then repeatedly for an operation number and its operands.

The menu bot reads its dishes from a JSON file, `menu.json` in the current
directory unless another path is given. It clears the screen between pages
by running `clear`; `--no-clear` turns that off:

```
autolab-menubot path/to/menu.json --no-clear
```

The file holds one list for each of the categories `starters`, `salads`,
`main_courses`, `drinks`, `appetizers` and `desserts`; a missing category
is left empty. Each item has a `name`, a `price` and a `taste_balance` with
the integer keys `sweet`, `sour`, `salty`, `bitter` and `savory`:

```json
{
  "starters": [
    {
      "name": "Lentil Soup",
      "price": 4.5,
      "taste_balance": {"sweet": 1, "sour": 2, "salty": 5, "bitter": 0, "savory": 7}
    }
  ],
  "salads": [],
  "main_courses": [],
  "drinks": [],
  "appetizers": [],
  "desserts": []
}
```

Note that `read_menu_json` stores the file's `bitter` value in the item's
`salty` field and the file's `salty` value in its `bitter` field.

A menu's taste balance is the average of its items' balances, each value
rounded toward zero; its total price is the sum of the item prices plus any
extras chosen on approval.

## Library use

```python
from autolab.matrix import Matrix

m = Matrix.from_rows([[0.0, 1.0, 2.0], [1.0, 2.0, 3.0], [3.0, 1.0, 1.0]])
print(m.determinant())
print(Matrix.dot(m, m.inverse()))

from autolab.points import Point3D, region, distance

p = Point3D(1.0, 2.0, 3.0)
print(region(p), distance(p, Point3D(4.0, 5.0, 6.0)))

from autolab.interface import read_menu_json, suggest_full_menu, suggest_menu_item
from autolab.menu import DishType, Menu, TasteBalance

available = Menu(read_menu_json("menu.json"))
wanted = TasteBalance(sweet=3, sour=2, salty=5, bitter=1, savory=6)
print(suggest_menu_item(available, wanted, DishType.DESSERT).describe())
print(suggest_full_menu(available, wanted).describe())
```

`suggest_menu_item` returns `None` when there is no dish of that type, and
`suggest_full_menu` returns `None` when some dish type has no items.
`User.approve_menu` and `add_item_by_type` in `autolab.cli` take `ask` and
`say` callables, so they can be driven without a terminal.

## What it does not do

The menu bot keeps everything in memory: a user's menu is not saved, and
each session starts with an empty menu. The restaurant menu can only be
read from a JSON file, not edited or written back.