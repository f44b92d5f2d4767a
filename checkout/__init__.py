"""checkout: cart pricing with layered discount rules."""

from .discount import (
    BASE_DISCOUNT_ATTRIBUTES,
    DISCOUNT_KEYS,
    ApplicationContext,
    DeductibleType,
    Discount,
    base_discount_for,
)
from .item import ITEM_KEYS, InventoryItem
from .inventory import Inventory
from .cart import Cart, CartEntry
from .loader import dump_inventory, load_inventory
from .selection import select_discounts
from .pricing import Cursor, price_entry
from .global_discounts import apply_global_discounts
from .summation import SummationResult, summarize
from .config import Settings, configure_logging
from .errors import CheckoutError, Err, InventoryError, InventoryFormatError, Ok, Result

__all__ = [
    # Discounts
    "BASE_DISCOUNT_ATTRIBUTES", "DISCOUNT_KEYS", "ApplicationContext",
    "DeductibleType", "Discount", "base_discount_for",
    # Inventory
    "ITEM_KEYS", "InventoryItem", "Inventory", "dump_inventory", "load_inventory",
    # Cart
    "Cart", "CartEntry",
    # Pricing
    "select_discounts", "Cursor", "price_entry", "apply_global_discounts",
    "SummationResult", "summarize",
    # Config
    "Settings", "configure_logging",
    # Errors
    "CheckoutError", "Err", "InventoryError", "InventoryFormatError", "Ok", "Result",
]
