import json
from decimal import Decimal
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import InvalidSelection

CENTS = Decimal("0.01")

# Per line; keeps totals well inside the default decimal precision.
MAX_QUANTITY = 1000


def format_price(amount: Decimal) -> str:
    """Render a monetary amount as dollars with two decimal places."""
    return f"${amount.quantize(CENTS)}"


class MenuItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    unit_price: Decimal = Field(ge=0)

    @field_validator("unit_price")
    @classmethod
    def round_to_cents(cls, value: Decimal) -> Decimal:
        return value.quantize(CENTS)


class LineItem(BaseModel):
    """One catalog item plus the quantity ordered."""

    model_config = ConfigDict(frozen=True)

    item: MenuItem
    quantity: int = Field(ge=1, le=MAX_QUANTITY)

    @property
    def line_total(self) -> Decimal:
        return self.item.unit_price * self.quantity


class Receipt(BaseModel):
    """Snapshot of a cart at checkout, attributed to a customer."""

    model_config = ConfigDict(frozen=True)

    customer_name: str
    lines: tuple[LineItem, ...]
    grand_total: Decimal

    def render(self) -> str:
        name = self.customer_name
        rows = [f"Checkout for {name}:"]
        rows.extend(
            f"{line.item.name} for {name} "
            f"({line.quantity} x {format_price(line.item.unit_price)} "
            f"= {format_price(line.line_total)})"
            for line in self.lines
        )
        rows.append(f"Total: {format_price(self.grand_total)}")
        rows.append(f"Thank you, {name}! Your order will be ready soon.")
        return "\n".join(rows)


DEFAULT_MENU_ITEMS = (
    MenuItem(name="Latte", unit_price=Decimal("3.50")),
    MenuItem(name="Espresso", unit_price=Decimal("2.00")),
    MenuItem(name="Cappuccino", unit_price=Decimal("4.00")),
)


class MenuCatalog(BaseModel):
    """Fixed, ordered set of purchasable items.

    Items are addressed by their 1-based position, which never changes for
    the lifetime of the catalog.
    """

    model_config = ConfigDict(frozen=True)

    items: tuple[MenuItem, ...] = Field(min_length=1)

    def __len__(self) -> int:
        return len(self.items)

    @classmethod
    def default(cls) -> "MenuCatalog":
        """Latte, Espresso and Cappuccino."""
        return cls(items=DEFAULT_MENU_ITEMS)

    @classmethod
    def from_dict(cls, data: dict) -> "MenuCatalog":
        """Load a catalog from a dictionary (matching JSON structure).

        Raises:
            pydantic.ValidationError: missing or malformed items.
        """
        return cls.model_validate(data)

    @classmethod
    def from_json_file(cls, path: str | Path) -> "MenuCatalog":
        """Load a catalog from a JSON file path."""
        with open(path, "r") as f:
            data = json.load(f)
        return cls.from_dict(data)

    def resolve(self, selection: int) -> MenuItem:
        """Return the item at a 1-based position.

        Raises:
            InvalidSelection: selection is outside [1, len(catalog)].
        """
        if not 1 <= selection <= len(self.items):
            raise InvalidSelection(selection, len(self.items))
        return self.items[selection - 1]

    def render(self) -> str:
        rows = ["Coffee Menu:"]
        rows.extend(
            f"{index}. {item.name} ({format_price(item.unit_price)})"
            for index, item in enumerate(self.items, 1)
        )
        return "\n".join(rows)

    # Defined last: the name shadows the builtin inside the class body.
    def list(self) -> tuple[MenuItem, ...]:
        return self.items
