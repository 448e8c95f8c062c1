"""Dishes, taste balances and the menu that groups them by dish type."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, Final

_RULE = "----------------"


def _format_number(value: float) -> str:
    return format(float(value), ".6g")


def _trunc_div(total: int, count: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(total) // count
    return quotient if total >= 0 else -quotient


class Taste(IntEnum):
    """Positions of the tastes in a taste sequence."""

    SWEET = 0
    SOUR = 1
    BITTER = 2
    SALTY = 3
    SAVORY = 4


class DishType(IntEnum):
    """The kinds of dish a menu is grouped by, in menu order."""

    STARTER = 0
    SALAD = 1
    MAIN_COURSE = 2
    DRINK = 3
    APPETIZER = 4
    DESSERT = 5

    @property
    def label(self) -> str:
        return _DISH_LABELS[self]


_DISH_LABELS = {
    DishType.STARTER: "Starters",
    DishType.SALAD: "Salads",
    DishType.MAIN_COURSE: "Main Courses",
    DishType.DRINK: "Drinks",
    DishType.APPETIZER: "Appetizers",
    DishType.DESSERT: "Desserts",
}


@dataclass
class TasteBalance:
    """How sweet, sour, salty, bitter and savory something is."""

    sweet: int = 0
    sour: int = 0
    salty: int = 0
    bitter: int = 0
    savory: int = 0

    @classmethod
    def from_tastes(cls, values: Sequence[int]) -> TasteBalance:
        """Build a balance from a sequence indexed by :class:`Taste`."""
        if len(values) < len(Taste):
            raise ValueError(f"expected {len(Taste)} taste values, got {len(values)}")
        return cls(
            sweet=values[Taste.SWEET],
            sour=values[Taste.SOUR],
            salty=values[Taste.SALTY],
            bitter=values[Taste.BITTER],
            savory=values[Taste.SAVORY],
        )

    def as_list(self) -> list[int]:
        """The values in the order sweet, sour, salty, bitter, savory."""
        return [self.sweet, self.sour, self.salty, self.bitter, self.savory]

    def describe(self) -> str:
        return "\n".join(
            [
                f"\tSweet: {self.sweet}",
                f"\tSour: {self.sour}",
                f"\tSalty: {self.salty}",
                f"\tBitter: {self.bitter}",
                f"\tSavory: {self.savory}",
            ]
        )


class Extras:
    """Surcharges for optional extra services."""

    SALAD_TOPPING: Final = 2.25
    DRINK_CARBONATION: Final = 0.5
    DRINK_ALCOHOL: Final = 2.5
    DESSERT_CHOCOLATE: Final = 1.5


@dataclass(eq=False)
class MenuItem:
    """A dish with a name, a price and a taste balance."""

    name: str = ""
    price: float = 0.0
    taste_balance: TasteBalance = field(default_factory=TasteBalance)

    dish_type: ClassVar[DishType | None] = None

    def _extra_lines(self) -> list[str]:
        return []

    def describe(self) -> str:
        lines = [
            f"\tName: {self.name}",
            f"\tPrice: {_format_number(self.price)}",
            "\tTaste Balance",
            _RULE,
            self.taste_balance.describe(),
        ]
        lines.extend(self._extra_lines())
        return "\n".join(lines)


@dataclass(eq=False)
class Starter(MenuItem):
    is_hot: bool = False

    dish_type: ClassVar[DishType | None] = DishType.STARTER

    def _extra_lines(self) -> list[str]:
        return [f"\tHotness Preference: {'Hot' if self.is_hot else 'Cold'}"]


@dataclass(eq=False)
class Salad(MenuItem):
    add_topping: bool = False
    topping: str = ""

    dish_type: ClassVar[DishType | None] = DishType.SALAD

    def _extra_lines(self) -> list[str]:
        if self.add_topping:
            return [f"\tAdditional Topping: {self.topping}"]
        return ["\tNo Topping Selected"]


@dataclass(eq=False)
class MainCourse(MenuItem):
    is_vegan: bool = False

    dish_type: ClassVar[DishType | None] = DishType.MAIN_COURSE

    def _extra_lines(self) -> list[str]:
        return [f"\tVegan: {'Yes' if self.is_vegan else 'No'}"]


@dataclass(eq=False)
class Drink(MenuItem):
    is_carbonated: bool = False
    is_alcoholic: bool = False

    dish_type: ClassVar[DishType | None] = DishType.DRINK

    def _extra_lines(self) -> list[str]:
        return [
            f"\tAdditional Carbonation: {'Yes' if self.is_carbonated else 'No'}",
            f"\tAdditional Alcohol: {'Yes' if self.is_alcoholic else 'No'}",
        ]


@dataclass(eq=False)
class Appetizer(MenuItem):
    is_before_main_course: bool = False

    dish_type: ClassVar[DishType | None] = DishType.APPETIZER

    def _extra_lines(self) -> list[str]:
        when = "Before the Main Course" if self.is_before_main_course else "After the Main Course"
        return [f"\tService Time Preference: {when}"]


@dataclass(eq=False)
class Dessert(MenuItem):
    add_chocolate: bool = False

    dish_type: ClassVar[DishType | None] = DishType.DESSERT

    def _extra_lines(self) -> list[str]:
        return [f"\tAdditional Chocolate: {'Yes' if self.add_chocolate else 'No'}"]


class Menu:
    """Menu items grouped by dish type, with an average taste and total price."""

    def __init__(self, categories: Iterable[Iterable[MenuItem]] | None = None) -> None:
        self.categories: list[list[MenuItem]] = [[] for _ in DishType]
        if categories is not None:
            groups = [list(group) for group in categories]
            if len(groups) > len(DishType):
                raise ValueError(f"a menu has at most {len(DishType)} dish types")
            for dish_type, group in zip(DishType, groups):
                self.categories[dish_type] = group
        self.taste_balance = TasteBalance()
        self.total_price = 0.0
        self.update_taste_balance_and_price()

    def __getitem__(self, dish_type: DishType) -> list[MenuItem]:
        return self.categories[dish_type]

    def __len__(self) -> int:
        return sum(len(group) for group in self.categories)

    def items(self) -> Iterator[MenuItem]:
        """All items, in dish-type order."""
        for group in self.categories:
            yield from group

    def add_item(self, item: MenuItem) -> None:
        """Add an item to the group of its dish type; untyped items are ignored."""
        if item.dish_type is not None:
            self.categories[item.dish_type].append(item)
        self.update_taste_balance_and_price()

    def remove_item(self, name: str) -> bool:
        """Remove the first item with this name; True if one was removed."""
        for group in self.categories:
            for position, item in enumerate(group):
                if item.name == name:
                    del group[position]
                    self.update_taste_balance_and_price()
                    return True
        return False

    def find_item_by_index(self, index: int) -> MenuItem | None:
        """The item at a 1-based position across all groups, or None."""
        for position, item in enumerate(self.items(), start=1):
            if position == index:
                return item
        return None

    def update_taste_balance_and_price(self) -> None:
        """Recompute the average taste balance and the total price."""
        all_items = list(self.items())
        if not all_items:
            self.taste_balance = TasteBalance()
            self.total_price = 0.0
            return
        totals = [sum(values) for values in zip(*(item.taste_balance.as_list() for item in all_items))]
        count = len(all_items)
        self.taste_balance = TasteBalance(*(_trunc_div(total, count) for total in totals))
        self.total_price = sum(item.price for item in all_items)

    def describe(self) -> str:
        lines = ["**********Your Menu**********"]
        for dish_type in DishType:
            lines.append(dish_type.label)
            lines.append(_RULE)
            group = self.categories[dish_type]
            if not group:
                lines.append(f"Empty Preference for Dish Type: {dish_type.label}")
                lines.append(_RULE)
            else:
                for item in group:
                    lines.append(item.describe())
                    lines.append(_RULE)
        lines.extend(
            [
                "**********End**********",
                "**********Overview of Your Menu**********",
                f"Total Price: {_format_number(self.total_price)}",
                _RULE,
                self.taste_balance.describe(),
                "**********End of Overview**********",
            ]
        )
        return "\n".join(lines)