"""Text request/response loop driving an OrderSession.

One blocking read per prompt. Operator mistakes (bad numbers, out-of-range
selections, non-positive quantities, unknown actions) are reported and the
loop returns to the main menu without touching the cart.
"""

import re
from collections.abc import Callable

from loguru import logger

from .enums import LoopState, MenuAction
from .errors import CoffeeShopError, InputParseError
from .session import OrderSession

MAIN_MENU = "\n".join(
    [
        "===== MENU =====",
        f"{MenuAction.ORDER_COFFEE}. Order Coffee",
        f"{MenuAction.VIEW_CART}. View Cart",
        f"{MenuAction.CHECK_OUT}. Check Out",
        f"{MenuAction.EXIT}. Exit",
    ]
)

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")


def parse_int(raw: str) -> int:
    """Parse operator input as a whole number.

    Raises:
        InputParseError: the stripped text is not an optionally signed run of digits.
    """
    text = raw.strip()
    if not _INTEGER_PATTERN.fullmatch(text):
        raise InputParseError(raw)
    try:
        return int(text)
    except ValueError:
        # Digit strings past the interpreter's int conversion limit
        raise InputParseError(raw) from None


class InteractionLoop:
    """Main-menu loop for a single customer.

    `input_fn` and `output_fn` default to the builtins; tests pass scripted
    replacements.
    """

    def __init__(
        self,
        session: OrderSession,
        customer_name: str,
        input_fn: Callable[[str], str] | None = None,
        output_fn: Callable[[str], None] | None = None,
    ) -> None:
        self.session = session
        self.customer_name = customer_name
        self._input = input_fn or input
        self._output = output_fn or print
        self.state = LoopState.AWAITING_ACTION

    def run(self) -> None:
        """Loop until the operator exits or input runs out."""
        logger.info("Session started for {}", self.customer_name)
        while self.state != LoopState.TERMINATED:
            self.step()
        logger.info("Session ended for {}", self.customer_name)

    def step(self) -> None:
        """Show the main menu, read one action and carry it out."""
        self._output("")
        self._output(MAIN_MENU)
        choice = self._read("Enter choice: ")
        if choice is None:
            return

        choice = choice.strip()
        logger.debug("Action input: {!r}", choice)
        try:
            action = MenuAction(choice)
        except ValueError:
            self._output("Invalid choice. Please try again.")
            return

        try:
            self._dispatch(action)
        except CoffeeShopError as exc:
            logger.warning("{}: {}", type(exc).__name__, exc)
            self._output(str(exc))
        finally:
            if self.state != LoopState.TERMINATED:
                self.state = LoopState.AWAITING_ACTION

    def _dispatch(self, action: MenuAction) -> None:
        if action is MenuAction.ORDER_COFFEE:
            self._order_coffee()
        elif action is MenuAction.VIEW_CART:
            self._output("")
            self._output(self.session.view_cart())
        elif action is MenuAction.CHECK_OUT:
            self._output("")
            self._output(self.session.checkout(self.customer_name))
        elif action is MenuAction.EXIT:
            self._output(f"Goodbye, {self.customer_name}!")
            self.state = LoopState.TERMINATED

    def _order_coffee(self) -> None:
        self._output("")
        self._output(self.session.catalog.render())

        self.state = LoopState.AWAITING_SELECTION
        raw_selection = self._read("Select coffee by number: ")
        if raw_selection is None:
            return
        selection = parse_int(raw_selection)

        self.state = LoopState.AWAITING_QUANTITY
        raw_quantity = self._read("Enter quantity: ")
        if raw_quantity is None:
            return
        quantity = parse_int(raw_quantity)

        line = self.session.add_to_cart(selection, quantity)
        self._output(f"Added {line.quantity} x {line.item.name} to cart.")

    def _read(self, prompt: str) -> str | None:
        """Read one line; None (and TERMINATED) once input is closed."""
        try:
            return self._input(prompt)
        except (EOFError, KeyboardInterrupt):
            self._output("")
            self._output(f"Goodbye, {self.customer_name}!")
            self.state = LoopState.TERMINATED
            return None
