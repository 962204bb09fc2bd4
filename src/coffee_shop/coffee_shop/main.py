"""CLI entry point for the coffee shop ordering tool.

Usage:
    coffee-shop
    python -m coffee_shop.main
"""

from loguru import logger

from .config import get_settings
from .logging import setup_logging
from .loop import InteractionLoop
from .models import MenuCatalog
from .session import OrderSession


def load_catalog(menu_json_path: str | None) -> MenuCatalog:
    """Catalog from the configured JSON file, or the built-in default."""
    if menu_json_path is None:
        return MenuCatalog.default()
    return MenuCatalog.from_json_file(menu_json_path)


def main() -> None:
    """Run the ordering CLI for one customer."""
    settings = get_settings()

    # Initialize logging first
    setup_logging(level=settings.log_level, log_file=settings.log_file)
    logger.info("Starting {} ordering CLI", settings.shop_name)

    catalog = load_catalog(settings.menu_json_path)
    logger.info("Menu loaded ({} items)", len(catalog))

    print(f"Welcome to {settings.shop_name}!")
    try:
        customer_name = input("Enter your name: ")
    except (EOFError, KeyboardInterrupt):
        print("\nGoodbye!")
        return

    InteractionLoop(OrderSession(catalog), customer_name).run()


if __name__ == "__main__":
    main()
