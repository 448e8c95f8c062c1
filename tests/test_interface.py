import json

import pytest

from autolab.interface import (
    calculate_covariance,
    calculate_distance,
    generate_menu_permutations,
    generate_permutations,
    read_menu_json,
    suggest_full_menu,
    suggest_menu_item,
)
from autolab.menu import (
    Appetizer,
    Dessert,
    DishType,
    Drink,
    MainCourse,
    Menu,
    Salad,
    Starter,
    TasteBalance,
)


def _taste(sweet=0, sour=0, salty=0, bitter=0, savory=0):
    return {"sweet": sweet, "sour": sour, "salty": salty, "bitter": bitter, "savory": savory}


SAMPLE = {
    "starters": [
        {"name": "Soup", "price": 5.5, "taste_balance": _taste(1, 2, 3, 4, 5)},
        {"name": "Bread", "price": 2, "taste_balance": _taste(0, 0, 1, 0, 2)},
    ],
    "salads": [{"name": "Greek", "price": 7, "taste_balance": _taste(0, 3, 4, 1, 2)}],
    "main_courses": [{"name": "Steak", "price": 20, "taste_balance": _taste(0, 0, 5, 0, 9)}],
    "drinks": [{"name": "Cola", "price": 3, "taste_balance": _taste(9, 1, 0, 0, 0)}],
    "appetizers": [{"name": "Olives", "price": 4, "taste_balance": _taste(0, 2, 6, 3, 1)}],
    "desserts": [{"name": "Cake", "price": 6, "taste_balance": _taste(10, 0, 0, 0, 0)}],
}


@pytest.fixture
def menu_file(tmp_path):
    path = tmp_path / "menu.json"
    path.write_text(json.dumps(SAMPLE), encoding="utf-8")
    return path


def _zero_menu(starters):
    return Menu(
        [
            starters,
            [Salad("S", 1, TasteBalance())],
            [MainCourse("M", 1, TasteBalance())],
            [Drink("D", 1, TasteBalance())],
            [Appetizer("A", 1, TasteBalance())],
            [Dessert("E", 1, TasteBalance())],
        ]
    )


def test_read_menu_json_groups_by_type(menu_file):
    categories = read_menu_json(menu_file)
    assert [len(group) for group in categories] == [2, 1, 1, 1, 1, 1]
    assert isinstance(categories[DishType.STARTER][0], Starter)
    assert isinstance(categories[DishType.DESSERT][0], Dessert)
    assert categories[DishType.STARTER][1].name == "Bread"
    assert categories[DishType.STARTER][0].price == 5.5


def test_read_menu_json_swaps_bitter_and_salty(menu_file):
    soup = read_menu_json(menu_file)[DishType.STARTER][0]
    assert soup.taste_balance.as_list() == [1, 2, 4, 3, 5]


def test_read_menu_then_build_menu(menu_file):
    menu = Menu(read_menu_json(menu_file))
    assert len(menu) == 7
    assert menu.total_price == pytest.approx(47.5)
    text = menu.describe()
    assert "\tName: Soup" in text
    assert "Empty Preference" not in text


def test_read_menu_json_missing_categories(tmp_path):
    path = tmp_path / "menu.json"
    path.write_text(json.dumps({"drinks": SAMPLE["drinks"]}), encoding="utf-8")
    categories = read_menu_json(path)
    assert [len(group) for group in categories] == [0, 0, 0, 1, 0, 0]


def test_read_menu_json_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_menu_json(tmp_path / "absent.json")


def test_read_menu_json_invalid_json(tmp_path):
    path = tmp_path / "menu.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        read_menu_json(path)


def test_calculate_distance():
    assert calculate_distance(TasteBalance(1, 2, 3, 4, 5), TasteBalance(1, 2, 3, 4, 5)) == 0.0
    assert calculate_distance(TasteBalance(), TasteBalance(3, 4, 0, 0, 0)) == pytest.approx(5.0)


def test_calculate_covariance():
    balance = TasteBalance(1, 2, 3, 4, 5)
    assert calculate_covariance(balance, balance) == pytest.approx(2.0)
    assert calculate_covariance(balance, TasteBalance(5, 5, 5, 5, 5)) == pytest.approx(0.0)


def test_generate_permutations_order():
    perms = generate_permutations([1, 0, 2])
    assert len(perms) == 6
    assert perms[0] == [0, 0, 0]
    assert perms[1] == [0, 0, 1]
    assert perms[-1] == [1, 0, 2]


def test_generate_permutations_edges():
    assert generate_permutations([]) == [[]]
    assert generate_permutations([2, -1]) == []


def test_generate_menu_permutations():
    menu = _zero_menu([Starter("X", 1, TasteBalance()), Starter("Y", 1, TasteBalance())])
    perms = generate_menu_permutations(menu)
    assert len(perms) == 2
    assert [p[DishType.STARTER][0].name for p in perms] == ["X", "Y"]
    assert all(len(p) == 6 for p in perms)


def test_generate_menu_permutations_with_empty_type():
    menu = Menu([[Starter("X", 1, TasteBalance())]])
    assert generate_menu_permutations(menu) == []


def test_suggest_menu_item_nearest():
    menu = Menu([[Starter("far", 1, TasteBalance(9, 9, 9, 9, 9)), Starter("near", 1, TasteBalance(1, 0, 0, 0, 0))]])
    chosen = suggest_menu_item(menu, TasteBalance(), DishType.STARTER)
    assert chosen.name == "near"


def test_suggest_menu_item_tie_prefers_lower_covariance():
    menu = Menu(
        [[Starter("A", 1, TasteBalance(1, 0, 0, 0, 10)), Starter("B", 1, TasteBalance(0, 0, 0, 0, 9))]]
    )
    chosen = suggest_menu_item(menu, TasteBalance(0, 0, 0, 0, 10), DishType.STARTER)
    assert chosen.name == "B"


def test_suggest_menu_item_empty_type():
    assert suggest_menu_item(Menu(), TasteBalance(), DishType.DRINK) is None


def test_suggest_full_menu():
    menu = _zero_menu(
        [Starter("Y", 1, TasteBalance(0, 0, 0, 0, 6)), Starter("X", 1, TasteBalance(6, 0, 0, 0, 0))]
    )
    suggested = suggest_full_menu(menu, TasteBalance(1, 0, 0, 0, 0))
    assert suggested[DishType.STARTER][0].name == "X"
    assert len(suggested) == 6
    assert suggested.taste_balance.as_list() == [1, 0, 0, 0, 0]


def test_suggest_full_menu_none_when_incomplete():
    assert suggest_full_menu(Menu(), TasteBalance()) is None