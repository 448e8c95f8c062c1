"""Loading the restaurant menu and suggesting dishes that fit a taste."""

from __future__ import annotations

import itertools
import json
import math
from collections.abc import Sequence
from os import PathLike

from autolab.menu import (
    Appetizer,
    Dessert,
    DishType,
    Drink,
    MainCourse,
    Menu,
    MenuItem,
    Salad,
    Starter,
    TasteBalance,
)

_CATEGORIES: dict[str, tuple[DishType, type[MenuItem]]] = {
    "starters": (DishType.STARTER, Starter),
    "salads": (DishType.SALAD, Salad),
    "main_courses": (DishType.MAIN_COURSE, MainCourse),
    "drinks": (DishType.DRINK, Drink),
    "appetizers": (DishType.APPETIZER, Appetizer),
    "desserts": (DishType.DESSERT, Dessert),
}


def _parse_item(entry: dict, item_class: type[MenuItem]) -> MenuItem:
    taste = entry["taste_balance"]
    name = entry["name"]
    if not isinstance(name, str):
        raise TypeError(f"menu item name must be a string, got {name!r}")
    balance = TasteBalance(
        sweet=int(taste["sweet"]),
        sour=int(taste["sour"]),
        # The file's bitter and salty values land in swapped fields.
        salty=int(taste["bitter"]),
        bitter=int(taste["salty"]),
        savory=int(taste["savory"]),
    )
    return item_class(name=name, price=float(entry["price"]), taste_balance=balance)


def read_menu_json(path: str | PathLike[str]) -> list[list[MenuItem]]:
    """Read a menu file into one list of items per dish type.

    Categories missing from the file stay empty. Raises OSError when the
    file cannot be opened and ValueError when it is not valid JSON.
    """
    with open(path, encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError("menu file must hold a JSON object")

    categories: list[list[MenuItem]] = [[] for _ in DishType]
    for key, (dish_type, item_class) in _CATEGORIES.items():
        entries = data.get(key) or []
        categories[dish_type].extend(_parse_item(entry, item_class) for entry in entries)
    return categories


def calculate_distance(balance1: TasteBalance, balance2: TasteBalance) -> float:
    """Euclidean distance between two taste balances."""
    return math.sqrt(
        sum((a - b) ** 2 for a, b in zip(balance1.as_list(), balance2.as_list()))
    )


def calculate_covariance(balance1: TasteBalance, balance2: TasteBalance) -> float:
    """Population covariance of the five taste values of two balances."""
    values1 = balance1.as_list()
    values2 = balance2.as_list()
    mean1 = sum(values1) / 5.0
    mean2 = sum(values2) / 5.0
    return sum((a - mean1) * (b - mean2) for a, b in zip(values1, values2)) / 5.0


def generate_permutations(max_sizes: Sequence[int]) -> list[list[int]]:
    """Every index combination with 0 <= index[i] <= max_sizes[i], in order."""
    return [list(combo) for combo in itertools.product(*(range(m + 1) for m in max_sizes))]


def generate_menu_permutations(menu: Menu) -> list[Menu]:
    """Every menu made of exactly one item of each dish type."""
    groups = [menu[dish_type] for dish_type in DishType]
    return [
        Menu([[group[index]] for group, index in zip(groups, combo)])
        for combo in generate_permutations([len(group) - 1 for group in groups])
    ]


def suggest_menu_item(
    available_menu: Menu, taste_balance: TasteBalance, dish_type: DishType
) -> MenuItem | None:
    """The item of this type closest to the taste; ties go to lower covariance."""
    best: MenuItem | None = None
    best_distance = math.inf
    for item in available_menu[dish_type]:
        dist = calculate_distance(taste_balance, item.taste_balance)
        if dist < best_distance:
            best_distance = dist
            best = item
        elif dist == best_distance and best is not None:
            current = calculate_covariance(taste_balance, item.taste_balance)
            incumbent = calculate_covariance(taste_balance, best.taste_balance)
            if current < incumbent:
                best = item
    return best


def suggest_full_menu(available_menu: Menu, taste_balance: TasteBalance) -> Menu | None:
    """The one-item-per-type menu whose average taste fits best, or None."""
    best: Menu | None = None
    best_distance = math.inf
    for candidate in generate_menu_permutations(available_menu):
        balance = candidate.taste_balance
        dist = calculate_distance(taste_balance, balance)
        if dist < best_distance:
            best_distance = dist
            best = candidate
        elif dist == best_distance and best is not None:
            current = calculate_covariance(taste_balance, balance)
            incumbent = calculate_covariance(taste_balance, best.taste_balance)
            if current < incumbent:
                best = candidate
    return best