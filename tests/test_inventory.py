"""Inventory loading, lookup and edits."""

import shutil
from pathlib import Path

import pytest

from checkout import (
    BASE_DISCOUNT_ATTRIBUTES,
    DISCOUNT_KEYS,
    ApplicationContext,
    Cart,
    DeductibleType,
    Err,
    Inventory,
    InventoryError,
    InventoryFormatError,
    InventoryItem,
    Ok,
    load_inventory,
)
from checkout.loader import DEFAULT_INVENTORY_PATH, resolve_inventory_path
from checkout.config import Settings

from helpers import FIXTURE_PATH


@pytest.fixture
def inventory_copy(tmp_path: Path) -> Path:
    target = tmp_path / "inventory.yml"
    shutil.copy(FIXTURE_PATH, target)
    return target


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def test_load_fixture() -> None:
    inventory = load_inventory(FIXTURE_PATH)
    assert len(inventory.items) == 2
    assert all(isinstance(i, InventoryItem) for i in inventory.items)
    assert inventory.items[0].cost == 50
    assert [d.name for d in inventory.discounts] == [
        "group_discount_on_price_total",
        "batch_discount_on_a",
    ]
    assert inventory.source_path == FIXTURE_PATH


def test_missing_discount_keys_take_defaults() -> None:
    inventory = load_inventory(FIXTURE_PATH)
    group = inventory.discounts[0]
    assert group.is_global
    assert group.deductible_type is DeductibleType.PERCENTAGE
    assert group.gt_bias == 150
    assert group.usable
    assert group.applicable_item_id is None

    batch = inventory.discounts[1]
    assert batch.application_context is ApplicationContext.BATCH
    assert batch.fixed_amount_total == 90
    assert batch.is_valid


def test_load_default_inventory(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CHECKOUT_INVENTORY_PATH", raising=False)
    inventory = load_inventory()
    assert inventory.source_path == DEFAULT_INVENTORY_PATH
    assert [i.name for i in inventory.items] == ["A", "B", "C"]
    assert len(inventory.discounts) == 4
    assert inventory.discounts[0].name == "batch_discount_on_a"


def test_inventory_path_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHECKOUT_INVENTORY_PATH", str(FIXTURE_PATH))
    assert resolve_inventory_path() == FIXTURE_PATH
    assert len(load_inventory().items) == 2


def test_explicit_path_wins_over_settings() -> None:
    settings = Settings(inventory_path=Path("/nowhere.yml"))
    assert resolve_inventory_path(FIXTURE_PATH, settings) == FIXTURE_PATH
    assert resolve_inventory_path(None, settings) == Path("/nowhere.yml")


@pytest.mark.parametrize(
    "content",
    [
        "items: [1, 2\n",
        "- just\n- a list\n",
        "items:\n  A: {id: 1, name: A}\n",
        "items:\n  A: {id: 1, name: A, cost: -5}\n",
        "discounts:\n  bad: {deductible_type: bogus}\n",
        "items: not-a-mapping\n",
        "discounts:\n  g: {global: true, deductible_amount: 10, gt_bias: '150'}\n",
        "discounts:\n  off: {applicable_item_id: 1, deductible_amount: 5, usable: 'false'}\n",
        "discounts:\n  g: {global: 'yes', deductible_amount: 10}\n",
        "discounts:\n  b: {application_context: batch, applicable_item_count: 2.5}\n",
        "discounts:\n  b: {fixed_amount_total: ninety}\n",
        "discounts:\n  p: {priority: high}\n",
        "discounts:\n  d: {deductible_amount: true}\n",
        "items:\n  A: {id: 1, name: A, cost: true}\n",
    ],
)
def test_malformed_inventory(tmp_path: Path, content: str) -> None:
    path = tmp_path / "broken.yml"
    path.write_text(content)
    with pytest.raises(InventoryFormatError):
        load_inventory(path)


def test_unreadable_inventory(tmp_path: Path) -> None:
    with pytest.raises(InventoryFormatError):
        load_inventory(tmp_path / "missing.yml")


def test_empty_document_is_empty_inventory(tmp_path: Path) -> None:
    path = tmp_path / "empty.yml"
    path.write_text("")
    inventory = load_inventory(path)
    assert inventory.items == []
    assert inventory.discounts == []


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


def test_find_item() -> None:
    inventory = load_inventory(FIXTURE_PATH)
    item = inventory.find_item("A")
    assert item is not None
    assert item.name == "A"
    assert inventory.find_item("Z") is None


# ---------------------------------------------------------------------------
# Edits
# ---------------------------------------------------------------------------


class TestAddItem:
    @pytest.fixture(autouse=True)
    def _inventory(self, inventory_copy: Path) -> None:
        self.path = inventory_copy
        self.inventory = load_inventory(inventory_copy)

    def test_adds_without_persisting(self) -> None:
        original = self.path.read_text()
        result = self.inventory.add_item({"id": 4, "name": "D", "cost": 60})
        match result:
            case Ok(item):
                assert item.name == "D"
            case Err(e):
                pytest.fail(f"Expected Ok, got Err: {e}")
        assert len(self.inventory.items) == 3
        assert self.inventory.find_item("D") is not None
        assert self.path.read_text() == original

    def test_adds_and_persists(self) -> None:
        self.inventory.add_item({"id": 4, "name": "D", "cost": 60}, persist=True)
        reloaded = load_inventory(self.path)
        assert reloaded.find_item("D") == InventoryItem(id=4, name="D", cost=60)

    @pytest.mark.parametrize("dropped", ["id", "name", "cost"])
    def test_rejects_missing_attributes(self, dropped: str) -> None:
        original = self.path.read_text()
        attrs = {"id": 4, "name": "D", "cost": 60}
        del attrs[dropped]
        result = self.inventory.add_item(attrs, persist=True)
        match result:
            case Err(e):
                assert isinstance(e, InventoryError)
                assert dropped in str(e)
            case Ok(item):
                pytest.fail(f"Expected Err, got Ok: {item}")
        assert len(self.inventory.items) == 2
        assert self.path.read_text() == original


class TestAddDiscount:
    @pytest.fixture(autouse=True)
    def _inventory(self, inventory_copy: Path) -> None:
        self.path = inventory_copy
        self.inventory = load_inventory(inventory_copy)
        self.attrs = {
            **BASE_DISCOUNT_ATTRIBUTES,
            "name": "test_discount",
            "applicable_item_id": 5,
        }

    def test_adds_without_persisting(self) -> None:
        result = self.inventory.add_discount(self.attrs)
        assert isinstance(result, Ok)
        assert result.value.name == "test_discount"
        assert len(self.inventory.discounts) == 3

    def test_adds_and_persists(self) -> None:
        self.inventory.add_discount(self.attrs, persist=True)
        reloaded = load_inventory(self.path)
        assert reloaded.discounts == self.inventory.discounts

    @pytest.mark.parametrize("dropped", DISCOUNT_KEYS)
    def test_rejects_missing_attributes(self, dropped: str) -> None:
        original = self.path.read_text()
        attrs = dict(self.attrs)
        del attrs[dropped]
        result = self.inventory.add_discount(attrs, persist=True)
        assert isinstance(result, Err)
        assert len(self.inventory.discounts) == 2
        assert self.path.read_text() == original

    def test_rejects_unknown_context(self) -> None:
        result = self.inventory.add_discount({**self.attrs, "application_context": "bulk"})
        assert isinstance(result, Err)
        assert len(self.inventory.discounts) == 2

    @pytest.mark.parametrize(
        "field, value",
        [
            ("gt_bias", "150"),
            ("deductible_amount", "5"),
            ("fixed_amount_total", [90]),
            ("applicable_item_count", 1.5),
            ("priority", "first"),
            ("usable", "false"),
            ("global", 1),
        ],
    )
    def test_rejects_mistyped_values(self, field: str, value: object) -> None:
        original = self.path.read_text()
        result = self.inventory.add_discount({**self.attrs, field: value}, persist=True)
        match result:
            case Err(e):
                assert field in str(e)
            case Ok(discount):
                pytest.fail(f"Expected Err, got Ok: {discount}")
        assert len(self.inventory.discounts) == 2
        assert self.path.read_text() == original


def test_save_requires_a_path() -> None:
    with pytest.raises(InventoryError):
        Inventory().save()


def test_save_round_trip(tmp_path: Path) -> None:
    inventory = load_inventory(FIXTURE_PATH)
    target = inventory.save(tmp_path / "nested" / "copy.yml")
    reloaded = load_inventory(target)
    assert reloaded.items == inventory.items
    assert reloaded.discounts == inventory.discounts


def test_disabled_discount_from_yaml_is_never_applied(tmp_path: Path) -> None:
    path = tmp_path / "inventory.yml"
    path.write_text(
        "items:\n"
        "  A: {id: 1, name: A, cost: 50}\n"
        "discounts:\n"
        "  off: {applicable_item_id: 1, deductible_amount: 5, usable: false}\n"
        "  g: {global: true, deductible_type: percentage, deductible_amount: 10, gt_bias: 150}\n"
    )
    result = Cart(load_inventory(path)).bulk_scan("A").total()
    assert result.total == 50
    assert result.cursor_for("A").applied_discounts == ("base_discount_on_a",)
    assert result.global_discounts_applied == ()
