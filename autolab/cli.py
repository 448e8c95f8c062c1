"""Interactive menu bot: browse the menu, build your own and get suggestions."""

from __future__ import annotations

import argparse
import subprocess
import sys
from collections.abc import Callable, Sequence

from autolab.interface import read_menu_json, suggest_full_menu, suggest_menu_item
from autolab.menu import DishType, Menu, Taste, TasteBalance
from autolab.user import Gender, User

Ask = Callable[[str], str]
Say = Callable[[str], None]

_PLUS = "++++++++++++++++++++"
_RULE = "----------------"
_INVALID = "Invalid input. Please try again."
_MAX_TASTE = 10


def _first_word(text: str) -> str:
    words = text.split()
    return words[0] if words else ""


def _numeric(text: str) -> int | None:
    """The answer as a non-negative integer, or None if it is not all digits."""
    word = _first_word(text)
    if word and all(c in "0123456789" for c in word):
        return int(word)
    return None


def _in_range(text: str, low: int, high: int) -> int | None:
    value = _numeric(text)
    if value is None or not low <= value <= high:
        return None
    return value


def _is_yes(text: str) -> bool:
    word = _first_word(text)
    return bool(word) and word[0] in "Yy"


def add_item_by_type(
    user: User,
    available_menu: Menu,
    dish_type: DishType,
    ask: Ask = input,
    say: Say = print,
) -> bool:
    """Let the user pick one item of ``dish_type`` and add it to their menu.

    Returns True when an item was added.
    """
    group = available_menu[dish_type]
    say(_PLUS)
    for index, item in enumerate(group, start=1):
        say(f"{index}. {item.describe()}")
        say(_PLUS)

    answer = ask("Which item would you like to add?")
    choice = _numeric(answer)
    if choice is None:
        say("Invalid input. Please enter a number.")
        return False
    if not 1 <= choice <= len(group):
        say("Invalid input. Please enter a valid number.")
        return False

    new_item = group[choice - 1]
    say("Chosen item is: ")
    say(_PLUS)
    say(new_item.describe())
    say(_PLUS)
    if _is_yes(ask("\nAre you sure to add this item?(Y or N)")):
        user.menu.add_item(new_item)
        return True
    return False


def _read_taste_balance(ask: Ask, say: Say) -> TasteBalance | None:
    say("Please enter your desired taste balance in the order of: "
        "Sweet, Sour, Salty, Bitter, Savory: ")
    values: list[int] = []
    for taste in Taste:
        value = _in_range(ask(f"{taste.name.title()}: "), 0, _MAX_TASTE)
        if value is None:
            say(_INVALID)
            return None
        values.append(value)
    return TasteBalance.from_tastes(values)


def _show_available(available_menu: Menu, ask: Ask, say: Say, clear: Callable[[], None]) -> None:
    clear()
    say(available_menu.describe())
    ask("Press enter to continue")


def _add_item(user: User, available_menu: Menu, ask: Ask, say: Say, clear: Callable[[], None]) -> None:
    clear()
    say("Please enter the type of the item you want to add: \n1. Starter\n2. Salad\n"
        "3. Main Course\n4. Drink\n5. Appetizer\n6. Dessert\n7. Return to Main Page")
    choice = _in_range(ask(""), 1, len(DishType) + 1)
    if choice is None:
        say(_INVALID)
        return
    if choice == len(DishType) + 1:
        say("Returning to main page...")
        return
    if add_item_by_type(user, available_menu, DishType(choice - 1), ask, say):
        say("Item added successfully!")
    else:
        say("Item did not added!")


def _remove_item(user: User, ask: Ask, say: Say) -> None:
    say(_PLUS)
    index = 0
    for dish_type in DishType:
        group = user.menu[dish_type]
        if not group:
            say(f"Empty Preference for Dish Type: {dish_type.label}")
            continue
        say(_RULE)
        for item in group:
            index += 1
            say(f"{index}. {item.describe()}")
            say(_PLUS)
    if index == 0:
        say("Your menu is empty!")
        return

    choice = _in_range(ask("Which item would you like to remove?"), 1, index)
    item = user.menu.find_item_by_index(choice) if choice is not None else None
    if item is None:
        say(_INVALID)
        return
    say("Chosen item is: ")
    say(item.describe())
    if _is_yes(ask("\nAre you sure to remove this item?(Y or N)")):
        user.menu.remove_item(item.name)
        say("Item removed successfully!")
    else:
        say("Item did not removed!")


def _suggest_item(user: User, available_menu: Menu, ask: Ask, say: Say) -> None:
    say("Menu item suggestion gives you the best fit menu item to your desired taste balance!")
    say("Please enter the type of the item you want to get suggestion for: \n1. Starter\n"
        "2. Salad\n3. Main Course\n4. Drink\n5. Appetizer\n6. Dessert")
    choice = _in_range(ask(""), 1, len(DishType))
    if choice is None:
        say(_INVALID)
        return
    balance = _read_taste_balance(ask, say)
    if balance is None:
        return
    suggestion = suggest_menu_item(available_menu, balance, DishType(choice - 1))
    if suggestion is None:
        say("There is no item of this type to suggest!")
        return
    say(suggestion.describe())
    if _is_yes(ask("\nAre you sure to choose this suggested menu item?(Y or N)")):
        user.menu.add_item(suggestion)
        say("Suggested menu item is chosen successfully!")
    else:
        say("Suggested menu item is not chosen, for another suggestion, please try again!")


def _suggest_menu(user: User, available_menu: Menu, ask: Ask, say: Say) -> None:
    say("Full menu suggestion gives you the best fit full menu to your desired taste balance!")
    balance = _read_taste_balance(ask, say)
    if balance is None:
        return
    suggestion = suggest_full_menu(available_menu, balance)
    if suggestion is None:
        say("There is no full menu to suggest!")
        return
    say(suggestion.describe())
    say("Your desired taste balance: ")
    say(balance.describe())
    if _is_yes(ask("\nAre you sure to choose this suggested menu?(Y or N)")):
        for item in suggestion.items():
            user.menu.add_item(item)
        say("Suggested menu is chosen successfully!")
    else:
        say("Suggested menu is not chosen, for another suggestion, please try again!")


def _session(available_menu: Menu, ask: Ask, say: Say, clear: Callable[[], None]) -> int:
    say("Welcome to the Menu Bot!")
    first_name = _first_word(ask("Please enter your first name: "))
    last_name = _first_word(ask("Please enter your last name: "))
    gender_choice = _numeric(ask("Please select your gender to address you by: \n1. MR\n2. MRS"))
    gender = Gender.MR
    if gender_choice == 2:
        gender = Gender.MRS
    elif gender_choice != 1:
        say("Invalid input. Default value (Mr) assigned")
    user = User(first_name, last_name, gender)

    while True:
        clear()
        say(f"Welcome {user.title()} {user.first_name} {user.last_name}")
        say("What would you like to do?")
        for line in ("1. See our menu", "2. Add item to your menu",
                     "3. Remove item from your menu", "4. Approve your menu",
                     "5. Print your menu", "6. Get menu item suggestion",
                     "7. Get full menu suggestion", "8. Exit"):
            say(line)
        choice = _in_range(ask("Please enter your choice: "), 1, 8)
        if choice is None:
            say(_INVALID)
        elif choice == 1:
            _show_available(available_menu, ask, say, clear)
        elif choice == 2:
            _add_item(user, available_menu, ask, say, clear)
        elif choice == 3:
            _remove_item(user, ask, say)
        elif choice == 4:
            clear()
            say("Before your menu is served, we must ask your preferences "
                "and whether you want some extra services.")
            if user.approve_menu(ask, say):
                say("Your menu is approved!")
                say("Thanks for using our menu bot, we hope you enjoyed. "
                    "You may pay your bill to the cashier!")
                say("Goodbye!")
                return 0
            say("Your menu is not approved!")
        elif choice == 5:
            clear()
            say(user.menu.describe())
            ask("Press enter to continue")
        elif choice == 6:
            _suggest_item(user, available_menu, ask, say)
        elif choice == 7:
            _suggest_menu(user, available_menu, ask, say)
        else:
            say("Goodbye!")
            return 0


def _stdin_ask(prompt: str) -> str:
    if prompt:
        print(prompt, end="" if prompt.endswith(" ") else "\n", flush=True)
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line


def _clear_screen() -> None:
    try:
        subprocess.run(["clear"], check=False)
    except OSError:
        pass


def main(argv: Sequence[str] | None = None) -> int:
    """Run the menu bot on standard input and output."""
    parser = argparse.ArgumentParser(description="Build a restaurant menu interactively.")
    parser.add_argument("menu_file", nargs="?", default="menu.json",
                        help="JSON file holding the restaurant menu")
    parser.add_argument("--no-clear", action="store_true",
                        help="do not clear the screen between pages")
    args = parser.parse_args(argv)

    try:
        available_menu = Menu(read_menu_json(args.menu_file))
    except (OSError, ValueError, KeyError, TypeError) as error:
        print(f"Cant parse JSON. Error: {error}")
        return 1

    clear = (lambda: None) if args.no_clear else _clear_screen
    try:
        return _session(available_menu, _stdin_ask, print, clear)
    except EOFError:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())