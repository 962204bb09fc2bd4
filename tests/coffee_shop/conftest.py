"""Shared pytest fixtures for coffee shop tests."""

from collections.abc import Iterable
from pathlib import Path

import pytest

from coffee_shop.models import MenuCatalog
from coffee_shop.session import OrderSession

# Sample menu shipped at the project root
MENU_JSON_PATH = Path(__file__).resolve().parents[2] / "menus" / "coffee-shop.json"


class ScriptedIO:
    """Feeds canned operator lines to a loop and records everything printed.

    Raises EOFError once the script runs out, like input() at end of stdin.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = iter(lines)
        self.prompts: list[str] = []
        self.printed: list[str] = []

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        try:
            return next(self._lines)
        except StopIteration:
            raise EOFError from None

    def output(self, text: str) -> None:
        self.printed.append(text)

    @property
    def transcript(self) -> str:
        return "\n".join(self.printed)


@pytest.fixture
def catalog() -> MenuCatalog:
    """Latte $3.50, Espresso $2.00, Cappuccino $4.00."""
    return MenuCatalog.default()


@pytest.fixture
def shipped_catalog() -> MenuCatalog:
    """Load the sample menu JSON."""
    return MenuCatalog.from_json_file(MENU_JSON_PATH)


@pytest.fixture
def session(catalog: MenuCatalog) -> OrderSession:
    """A fresh session with an empty cart."""
    return OrderSession(catalog)


@pytest.fixture
def scripted():
    """Factory for ScriptedIO instances."""
    return ScriptedIO
