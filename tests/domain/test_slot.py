"""Unit tests for the Slot aggregate."""

import pytest

from vending.domain.exceptions import (
    CapacityExceededError,
    NonPositiveQuantityError,
    ParseError,
    ProductMismatchError,
    SizeMismatchError,
    SlotEmptyError,
    ValidationError,
)
from vending.domain.model.product import Product, Size
from vending.domain.model.slot import Slot
from vending.domain.model.value_objects import Money

WATER = Product(name="Water", price=Money(80), size=Size.S)
CHIPS = Product(name="Chips", price=Money(150), size=Size.M)
MELON = Product(name="Melon", price=Money(300), size=Size.L)


class TestSlotCreation:

    def test_new_slot_is_empty(self):
        slot = Slot(size=Size.M, capacity=5)
        assert slot.is_empty
        assert slot.product is None
        assert slot.count == 0
        assert slot.free_space == 5

    @pytest.mark.parametrize("capacity", [0, -3])
    def test_non_positive_capacity_rejected(self, capacity):
        with pytest.raises(ValidationError, match="capacity must be positive"):
            Slot(size=Size.S, capacity=capacity)

    def test_parse(self):
        slot = Slot.parse(" 10 | l ")
        assert slot.size is Size.L
        assert slot.capacity == 10

    @pytest.mark.parametrize(
        "text", ["10", "10|M|x", "ten|M", "10|XL", "0|S", "-1|S", "1_0|M", "١٠|M"]
    )
    def test_parse_invalid(self, text):
        with pytest.raises(ParseError):
            Slot.parse(text)


class TestSlotLoad:

    def test_load_sets_product_and_count(self):
        slot = Slot(size=Size.M, capacity=5)
        slot.load(CHIPS, 3)
        assert slot.product == CHIPS
        assert slot.count == 3
        assert slot.free_space == 2

    def test_load_smaller_product(self):
        slot = Slot(size=Size.L, capacity=2)
        slot.load(WATER, 2)
        assert slot.count == 2

    def test_load_same_product_again(self):
        slot = Slot(size=Size.S, capacity=5)
        slot.load(WATER, 2)
        slot.load(Product(name="Water", price=Money(80), size=Size.S), 3)
        assert slot.count == 5

    def test_size_mismatch(self):
        slot = Slot(size=Size.S, capacity=5)
        with pytest.raises(SizeMismatchError) as info:
            slot.load(CHIPS, 1)
        assert info.value.code == "size"
        assert slot.is_empty

    def test_product_mismatch(self):
        slot = Slot(size=Size.M, capacity=5)
        slot.load(WATER, 1)
        with pytest.raises(ProductMismatchError) as info:
            slot.load(CHIPS, 1)
        assert info.value.code == "item"
        assert slot.product == WATER

    def test_same_name_different_price_is_another_product(self):
        slot = Slot(size=Size.S, capacity=5)
        slot.load(WATER, 1)
        with pytest.raises(ProductMismatchError):
            slot.load(Product(name="Water", price=Money(90), size=Size.S), 1)

    def test_capacity_exceeded(self):
        slot = Slot(size=Size.M, capacity=3)
        slot.load(CHIPS, 2)
        with pytest.raises(CapacityExceededError) as info:
            slot.load(CHIPS, 2)
        assert info.value.code == "capacity"
        assert slot.count == 2

    def test_size_checked_before_capacity(self):
        slot = Slot(size=Size.S, capacity=1)
        with pytest.raises(SizeMismatchError):
            slot.load(MELON, 5)

    @pytest.mark.parametrize("qty", [0, -1])
    def test_non_positive_quantity(self, qty):
        with pytest.raises(NonPositiveQuantityError):
            Slot(size=Size.M, capacity=3).load(CHIPS, qty)


class TestSlotAccepts:

    def test_accepts(self):
        slot = Slot(size=Size.M, capacity=1)
        assert slot.accepts(WATER)
        assert slot.accepts(CHIPS)
        assert not slot.accepts(MELON)

    def test_accepts_ignores_capacity(self):
        slot = Slot(size=Size.M, capacity=1)
        slot.load(CHIPS, 1)
        assert slot.accepts(CHIPS)
        assert not slot.accepts(WATER)


class TestSlotDispense:

    def test_dispense_decrements(self):
        slot = Slot(size=Size.M, capacity=3)
        slot.load(CHIPS, 2)
        assert slot.dispense() == CHIPS
        assert slot.count == 1
        assert slot.product == CHIPS

    def test_dispense_last_clears_product(self):
        slot = Slot(size=Size.M, capacity=3)
        slot.load(CHIPS, 1)
        slot.dispense()
        assert slot.is_empty
        assert slot.product is None
        assert slot.accepts(WATER)

    def test_dispense_empty(self):
        with pytest.raises(SlotEmptyError) as info:
            Slot(size=Size.M, capacity=3).dispense()
        assert info.value.code == "empty"

    def test_contents_are_read_only(self):
        slot = Slot(size=Size.M, capacity=3)
        slot.load(CHIPS, 1)
        with pytest.raises(AttributeError):
            slot.count = 3
        with pytest.raises(AttributeError):
            slot.product = WATER
        assert (slot.product, slot.count) == (CHIPS, 1)


class TestSlotStr:

    def test_empty(self):
        assert str(Slot(size=Size.M, capacity=4)) == "<-, M, 0, 4>"

    def test_loaded(self):
        slot = Slot(size=Size.L, capacity=4)
        slot.load(CHIPS, 2)
        assert str(slot) == "<<Chips, 1 unit 50 cents, M>, L, 2, 4>"
