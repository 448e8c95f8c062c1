"""The diner who builds a menu and approves it with extra services."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from autolab.menu import (
    Appetizer,
    Dessert,
    DishType,
    Drink,
    Extras,
    MainCourse,
    Menu,
    MenuItem,
    Salad,
    Starter,
)

_RULE = "----------------"

Ask = Callable[[str], str]
Say = Callable[[str], None]


class Gender(Enum):
    """How the user wants to be addressed."""

    MR = "Mr."
    MRS = "Mrs."


def _is_yes(answer: str) -> bool:
    answer = answer.strip()
    return bool(answer) and answer[0] in "Yy"


def _first_word(answer: str) -> str:
    words = answer.split()
    return words[0] if words else ""


@dataclass
class User:
    """A user of the menu bot with their own menu."""

    first_name: str
    last_name: str
    gender: Gender = Gender.MR
    menu: Menu = field(default_factory=Menu)

    def title(self) -> str:
        """The form of address, such as ``Mr.`` or ``Mrs.``."""
        return self.gender.value

    def _adjust_price(self, amount: float) -> None:
        self.menu.total_price += amount

    def _ask_starter(self, item: MenuItem, ask: Ask, say: Say) -> None:
        hot = _is_yes(ask("Do you want us to serve your starter as hot? (Y or N)"))
        if isinstance(item, Starter):
            item.is_hot = hot
        say("Your starter will be served as hot!" if hot else "Your starter will be served as cold!")

    def _ask_salad(self, item: MenuItem, ask: Ask, say: Say) -> None:
        if _is_yes(ask("Do you want an extra topping to your salad with an extra cost $2.25? (Y or N)")):
            topping = _first_word(ask("Please enter the topping you want to add: "))
            if isinstance(item, Salad):
                item.add_topping = True
                item.topping = topping
            self._adjust_price(Extras.SALAD_TOPPING)
            say(f"Your salad will be served with an extra topping {topping}!")
        else:
            if isinstance(item, Salad):
                if item.add_topping:
                    self._adjust_price(-Extras.SALAD_TOPPING)
                item.add_topping = False
                item.topping = ""
            say("Your salad will not be served with an extra topping!")

    def _ask_main_course(self, item: MenuItem, ask: Ask, say: Say) -> None:
        vegan = _is_yes(ask("Do you want us to serve your main course as vegan option? (Y or N)"))
        if isinstance(item, MainCourse):
            item.is_vegan = vegan
        if vegan:
            say("Your main course will be served with a vegan option!")
        else:
            say("Your main course will not be served with a vegan option!")

    def _ask_drink(self, item: MenuItem, ask: Ask, say: Say) -> None:
        if _is_yes(ask("Do you want to add some extra carbonation to your drink "
                       "with an extra cost $0.5? (Y or N)")):
            if isinstance(item, Drink):
                item.is_carbonated = True
            self._adjust_price(Extras.DRINK_CARBONATION)
            say("Your drink will be served with an extra carbonation!")
        else:
            if isinstance(item, Drink):
                if item.is_carbonated:
                    self._adjust_price(-Extras.DRINK_CARBONATION)
                item.is_carbonated = False
            say("Your drink will not be served with an extra carbonation!")

        if _is_yes(ask("Do you want to add some extra alcohol shot to your drink "
                       "with an extra cost $2.5? (Y or N)")):
            if isinstance(item, Drink):
                item.is_alcoholic = True
            self._adjust_price(Extras.DRINK_ALCOHOL)
            say("Your drink will be served with an extra alcohol shot!")
        else:
            if isinstance(item, Drink):
                if item.is_alcoholic:
                    self._adjust_price(-Extras.DRINK_ALCOHOL)
                item.is_alcoholic = False
            say("Your drink will not be served with an extra alcohol shot!")

    def _ask_appetizer(self, item: MenuItem, ask: Ask, say: Say) -> None:
        before = _is_yes(ask("Do you want us to serve your appetizer before the main course, "
                             "as a tradition we serve them after the main course? (Y or N)"))
        if isinstance(item, Appetizer):
            item.is_before_main_course = before
        if before:
            say("Your appetizer will be served before your main course!")
        else:
            say("Your appetizer will be served after your main course!")

    def _ask_dessert(self, item: MenuItem, ask: Ask, say: Say) -> None:
        if _is_yes(ask("Do you want to add some extra chocolate to your dessert "
                       "with an extra cost $1.5? (Y or N)")):
            if isinstance(item, Dessert):
                item.add_chocolate = True
            self._adjust_price(Extras.DESSERT_CHOCOLATE)
            say("Your dessert will be served with an extra chocolate!")
        else:
            if isinstance(item, Dessert):
                if item.add_chocolate:
                    self._adjust_price(-Extras.DESSERT_CHOCOLATE)
                item.add_chocolate = False
            say("Your dessert will not be served with an extra chocolate!")

    def approve_menu(self, ask: Ask = input, say: Say = print) -> bool:
        """Ask about extra services for every item, then ask for approval.

        ``ask`` shows a prompt and returns the answer; ``say`` shows a message.
        Returns True when the user approves the menu.
        """
        handlers = {
            DishType.STARTER: self._ask_starter,
            DishType.SALAD: self._ask_salad,
            DishType.MAIN_COURSE: self._ask_main_course,
            DishType.DRINK: self._ask_drink,
            DishType.APPETIZER: self._ask_appetizer,
            DishType.DESSERT: self._ask_dessert,
        }
        for dish_type in DishType:
            for item in self.menu[dish_type]:
                say(_RULE)
                say(item.describe())
                say(_RULE)
                handlers[dish_type](item, ask, say)

        if _is_yes(ask("Do you want to see your last menu before approval? (Y or N)")):
            say(self.menu.describe())
            ask("Press enter to continue")

        return _is_yes(ask("Do you want to approve your menu? (Y or N)"))