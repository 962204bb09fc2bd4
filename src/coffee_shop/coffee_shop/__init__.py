"""Coffee shop ordering CLI: menu catalog, cart session and text loop."""

from .enums import LoopState, MenuAction
from .errors import CoffeeShopError, InputParseError, InvalidQuantity, InvalidSelection
from .loop import InteractionLoop, parse_int
from .models import LineItem, MenuCatalog, MenuItem, Receipt, format_price
from .session import OrderSession

__all__ = [
    "CoffeeShopError",
    "InputParseError",
    "InteractionLoop",
    "InvalidQuantity",
    "InvalidSelection",
    "LineItem",
    "LoopState",
    "MenuAction",
    "MenuCatalog",
    "MenuItem",
    "OrderSession",
    "Receipt",
    "format_price",
    "parse_int",
]
