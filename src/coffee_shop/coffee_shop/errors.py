"""Recoverable operator errors.

Each carries a message suitable for showing to the operator as-is. The
interaction loop reports these and keeps going; anything else propagates.
"""


class CoffeeShopError(Exception):
    """Base class for errors the interaction loop recovers from."""

    message = "Something went wrong."

    def __str__(self) -> str:
        return self.message


class InvalidSelection(CoffeeShopError):
    """Selection index outside the catalog's 1-based range."""

    message = "Invalid selection."

    def __init__(self, selection: int, catalog_size: int) -> None:
        super().__init__(selection, catalog_size)
        self.selection = selection
        self.catalog_size = catalog_size


class InvalidQuantity(CoffeeShopError):
    """Quantity outside [1, max_quantity]."""

    def __init__(self, quantity: int, max_quantity: int) -> None:
        super().__init__(quantity, max_quantity)
        self.quantity = quantity
        self.max_quantity = max_quantity
        self.message = f"Quantity must be between 1 and {max_quantity}."


class InputParseError(CoffeeShopError):
    """Text that should have been a whole number wasn't."""

    def __init__(self, raw: str) -> None:
        super().__init__(raw)
        self.raw = raw
        self.message = f"'{raw}' is not a whole number."
