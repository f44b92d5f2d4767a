"""Builders shared by the test modules."""

from pathlib import Path

from checkout import (
    ApplicationContext,
    CartEntry,
    DeductibleType,
    Discount,
    Inventory,
    InventoryItem,
)

FIXTURE_PATH = Path(__file__).parent / "fixtures" / "inventory.yml"

ITEM_A = InventoryItem(id=1, name="A", cost=50)
ITEM_B = InventoryItem(id=2, name="B", cost=30)
ITEM_C = InventoryItem(id=3, name="C", cost=20)


def batch(name: str, item: InventoryItem, count: int, **kwargs) -> Discount:
    return Discount(
        name=name,
        application_context=ApplicationContext.BATCH,
        applicable_item_count=count,
        applicable_item_id=item.id,
        **kwargs,
    )


def single(name: str, item: InventoryItem, **kwargs) -> Discount:
    return Discount(name=name, applicable_item_id=item.id, **kwargs)


def percentage_global(name: str, amount: float, **kwargs) -> Discount:
    return Discount(
        name=name,
        is_global=True,
        deductible_type=DeductibleType.PERCENTAGE,
        deductible_amount=amount,
        **kwargs,
    )


def entry(item: InventoryItem, amount: int) -> CartEntry:
    return CartEntry(item=item, amount=amount)


def abc_inventory(*discounts: Discount) -> Inventory:
    return Inventory(items=[ITEM_A, ITEM_B, ITEM_C], discounts=list(discounts))
