"""Order session: the cart for one run, plus checkout.

The session is constructed explicitly around a catalog; nothing here is a
module-level singleton, so independent sessions never share a cart.
"""

from decimal import Decimal

from loguru import logger

from .errors import InvalidQuantity
from .models import CENTS, MAX_QUANTITY, LineItem, MenuCatalog, Receipt, format_price

EMPTY_CART_MESSAGE = "Your cart is empty."
NOTHING_TO_CHECKOUT_MESSAGE = "Cart is empty. Nothing to checkout."


class OrderSession:
    def __init__(self, catalog: MenuCatalog) -> None:
        self.catalog = catalog
        self._cart: list[LineItem] = []

    def __len__(self) -> int:
        return len(self._cart)

    @property
    def items(self) -> tuple[LineItem, ...]:
        """Snapshot of the cart in insertion order."""
        return tuple(self._cart)

    def add_to_cart(self, selection: int, quantity: int) -> LineItem:
        """Append `quantity` of the item at 1-based `selection` to the cart.

        Both arguments are validated before the cart is touched, so a failed
        call leaves the cart exactly as it was.

        Raises:
            InvalidSelection: selection is outside the catalog.
            InvalidQuantity: quantity is outside [1, MAX_QUANTITY].
        """
        item = self.catalog.resolve(selection)
        if not 1 <= quantity <= MAX_QUANTITY:
            raise InvalidQuantity(quantity, MAX_QUANTITY)

        line = LineItem(item=item, quantity=quantity)
        self._cart.append(line)
        logger.info("Added {}x {} to cart ({} lines)", quantity, item.name, len(self._cart))
        return line

    def cart_total(self) -> Decimal:
        return sum((line.line_total for line in self._cart), Decimal("0")).quantize(CENTS)

    def view_cart(self) -> str:
        """Render the cart with per-line totals and the cart total."""
        logger.debug("Rendering cart with {} lines", len(self._cart))
        if not self._cart:
            return EMPTY_CART_MESSAGE

        rows = ["Your Cart:"]
        rows.extend(
            f"{position}. {line.item.name} x {line.quantity} = {format_price(line.line_total)}"
            for position, line in enumerate(self._cart, 1)
        )
        rows.append(f"Total: {format_price(self.cart_total())}")
        return "\n".join(rows)

    def build_receipt(self, customer_name: str) -> Receipt | None:
        """Receipt for the current cart, or None when there is nothing to check out."""
        if not self._cart:
            return None
        return Receipt(
            customer_name=customer_name,
            lines=tuple(self._cart),
            grand_total=self.cart_total(),
        )

    def checkout(self, customer_name: str) -> str:
        """Render the receipt for `customer_name` and clear the cart.

        An empty cart is reported and left untouched.
        """
        receipt = self.build_receipt(customer_name)
        if receipt is None:
            logger.debug("Checkout requested with an empty cart")
            return NOTHING_TO_CHECKOUT_MESSAGE

        rendered = receipt.render()
        self._cart.clear()
        logger.info(
            "Checked out {} lines for {} (total={})",
            len(receipt.lines),
            customer_name,
            format_price(receipt.grand_total),
        )
        return rendered
