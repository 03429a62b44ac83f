"""Unit tests for the CoinBag multiset."""

import pytest

from vending.domain.exceptions import (
    InsufficientDenominationError,
    InsufficientValueError,
    NonPositiveQuantityError,
    ParseError,
    UnknownCoinError,
)
from vending.domain.model.coin import Coin
from vending.domain.model.coin_bag import CoinBag
from vending.domain.model.value_objects import Money


def _bag(**counts) -> CoinBag:
    return CoinBag({Coin[name]: qty for name, qty in counts.items()})


class TestCoinBagBasics:

    def test_empty_bag(self):
        bag = CoinBag()
        assert bag.is_empty
        assert len(bag) == 0
        assert bag.total_value() == Money(0)
        assert str(bag) == "<>"

    def test_quantity_of_absent_coin_is_zero(self):
        assert CoinBag().quantity_of(Coin.CENT_5) == 0

    def test_add_accumulates(self):
        bag = CoinBag()
        bag.add(Coin.CENT_10, 2)
        bag.add(Coin.CENT_10, 3)
        assert bag.quantity_of(Coin.CENT_10) == 5
        assert len(bag) == 5

    @pytest.mark.parametrize("qty", [0, -1])
    def test_add_non_positive_rejected(self, qty):
        with pytest.raises(NonPositiveQuantityError, match="must be positive"):
            CoinBag().add(Coin.CENT_10, qty)

    def test_constructor_rejects_zero_counts(self):
        with pytest.raises(NonPositiveQuantityError):
            CoinBag({Coin.CENT_1: 0})

    def test_total_value(self):
        bag = _bag(CENT_20=3, EURO_1=2, CENT_5=1)
        assert bag.total_value() == Money(265)

    def test_total_value_tracks_mutations(self):
        bag = _bag(CENT_50=1)
        bag.add(Coin.CENT_50, 1)
        assert bag.total_value() == Money(100)

    def test_merge(self):
        bag = _bag(CENT_10=1, CENT_20=1)
        bag.merge(_bag(CENT_20=2, EURO_2=1))
        assert bag == _bag(CENT_10=1, CENT_20=3, EURO_2=1)

    def test_merge_leaves_other_untouched(self):
        other = _bag(CENT_1=4)
        _bag(CENT_2=1).merge(other)
        assert other == _bag(CENT_1=4)

    def test_contains(self):
        bag = _bag(CENT_10=3, CENT_50=1)
        assert bag.contains(_bag(CENT_10=2))
        assert bag.contains(CoinBag())
        assert not bag.contains(_bag(CENT_10=4))
        assert not bag.contains(_bag(CENT_1=1))

    def test_copy_is_independent(self):
        bag = _bag(CENT_5=2)
        clone = bag.copy()
        clone.add(Coin.CENT_5, 1)
        assert bag.quantity_of(Coin.CENT_5) == 2
        assert clone.quantity_of(Coin.CENT_5) == 3

    def test_clear_returns_removed_coins(self):
        bag = _bag(CENT_5=2, EURO_1=1)
        removed = bag.clear()
        assert bag.is_empty
        assert removed == _bag(CENT_5=2, EURO_1=1)

    def test_equality_ignores_insertion_order(self):
        a = CoinBag()
        a.add(Coin.EURO_1, 1)
        a.add(Coin.CENT_1, 2)
        b = CoinBag()
        b.add(Coin.CENT_1, 2)
        b.add(Coin.EURO_1, 1)
        assert a == b


class TestCoinBagSubtract:

    def test_subtract(self):
        bag = _bag(CENT_10=3, CENT_50=2)
        bag.subtract(_bag(CENT_10=1, CENT_50=2))
        assert bag == _bag(CENT_10=2)

    def test_subtract_removes_zero_counts(self):
        bag = _bag(CENT_10=1, CENT_20=1)
        bag.subtract(_bag(CENT_10=1))
        assert bag.quantity_of(Coin.CENT_10) == 0
        assert [coin for coin, _ in bag] == [Coin.CENT_20]

    def test_subtract_self_gives_empty_bag(self):
        bag = _bag(CENT_1=3, CENT_20=2, EURO_2=1)
        bag.subtract(bag.copy())
        assert bag.is_empty

    def test_insufficient_value_reported_first(self):
        bag = _bag(CENT_10=1)
        with pytest.raises(InsufficientValueError) as info:
            bag.subtract(_bag(CENT_50=1))
        assert info.value.code == "value"

    def test_insufficient_denomination(self):
        bag = _bag(EURO_1=1)
        with pytest.raises(InsufficientDenominationError) as info:
            bag.subtract(_bag(CENT_50=1))
        assert info.value.code == "coins"

    def test_failed_subtract_leaves_bag_unchanged(self):
        bag = _bag(CENT_10=5, EURO_1=1)
        before = bag.copy()
        # First coin is fine, second is short: nothing must be removed.
        with pytest.raises(InsufficientDenominationError):
            bag.subtract(_bag(CENT_10=2, CENT_50=1))
        assert bag == before

        with pytest.raises(InsufficientValueError):
            bag.subtract(_bag(EURO_2=1))
        assert bag == before


class TestCoinBagIteration:

    def test_iterates_in_ascending_face_value(self):
        bag = CoinBag()
        bag.add(Coin.EURO_2, 1)
        bag.add(Coin.CENT_1, 4)
        bag.add(Coin.CENT_50, 2)
        assert list(bag) == [(Coin.CENT_1, 4), (Coin.CENT_50, 2), (Coin.EURO_2, 1)]

    def test_iteration_is_a_snapshot(self):
        bag = _bag(CENT_1=1, CENT_2=1)
        it = iter(bag)
        bag.add(Coin.EURO_1, 1)
        bag.subtract(_bag(CENT_2=1))
        assert list(it) == [(Coin.CENT_1, 1), (Coin.CENT_2, 1)]

    def test_mutating_while_iterating_is_safe(self):
        bag = _bag(CENT_1=1, CENT_5=1)
        for coin, count in bag:
            bag.add(coin, count)
        assert bag == _bag(CENT_1=2, CENT_5=2)


class TestCoinBagText:

    def test_str(self):
        bag = _bag(EURO_1=1, CENT_20=3, CENT_1=1)
        assert str(bag) == "<1 x 1 cent, 3 x 20 cents, 1 x 1 unit>"

    def test_parse(self):
        bag = CoinBag.parse("10 x .20, 5 x .50, 20 x 1")
        assert bag == _bag(CENT_20=10, CENT_50=5, EURO_1=20)

    def test_parse_merges_repeated_coins(self):
        assert CoinBag.parse("1 x .10, 2 x 0.10") == _bag(CENT_10=3)

    def test_parse_tolerates_spacing(self):
        assert CoinBag.parse("  3x.05 ,1 x   2  ") == _bag(CENT_5=3, EURO_2=1)

    @pytest.mark.parametrize("text", ["", "   ", "<>"])
    def test_parse_empty(self, text):
        assert CoinBag.parse(text).is_empty

    def test_parse_rendered_form_round_trips(self):
        bag = _bag(CENT_1=2, CENT_2=1, CENT_10=4, CENT_50=1, EURO_1=3, EURO_2=2)
        assert CoinBag.parse(str(bag)) == bag

    @pytest.mark.parametrize(
        "text",
        [
            "3 .20", "x x .20", "0 x .20", "-1 x .20", "2 x abc", "1 x .20, 2",
            "1_0 x .20", "١ x .20",
        ],
    )
    def test_parse_malformed(self, text):
        with pytest.raises(ParseError):
            CoinBag.parse(text)

    def test_parse_unknown_coin(self):
        with pytest.raises(UnknownCoinError):
            CoinBag.parse("2 x .03")
