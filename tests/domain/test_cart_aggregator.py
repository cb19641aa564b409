"""Unit tests for the Cart aggregate and the CartAggregator service."""

import dataclasses
import random

import pytest

from burgerbuilder.domain.exceptions import (
    EntityNotFoundError,
    InvalidSimpleItem,
    ValidationError,
)
from burgerbuilder.domain.model.cart import Cart, CartLine, LineKind
from burgerbuilder.domain.model.value_objects import Money, Quantity
from burgerbuilder.domain.service.cart_aggregator import CartAggregator
from burgerbuilder.domain.service.composition_engine import CompositionEngine
from tests.fakes import make_catalog, sequential_ids


def _aggregator() -> CartAggregator:
    return CartAggregator(make_catalog(), sequential_ids("line"))


def _composed(*addons: str, prefix: str = "sel") -> CartLine:
    engine = CompositionEngine(make_catalog(), sequential_ids(prefix))
    engine.start("base_burger")
    for addon in addons:
        engine.add(addon)
    return engine.finalize()


class TestAddComposed:

    def test_appends_line_as_is(self):
        cart = _aggregator()
        line = _composed("bacon")
        cart.add_composed(line)
        assert cart.lines() == (line,)
        assert cart.total() == Money.of("20.50")

    def test_identical_compositions_do_not_merge(self):
        cart = _aggregator()
        first = _composed("bacon", "cheese", prefix="a")
        second = _composed("bacon", "cheese", prefix="b")
        cart.add_composed(first)
        cart.add_composed(second)
        assert len(cart.lines()) == 2
        assert cart.total() == Money.of("46.00")

    def test_stored_line_cannot_be_repriced(self):
        cart = _aggregator()
        line = _composed("bacon")
        cart.add_composed(line)

        with pytest.raises(dataclasses.FrozenInstanceError):
            line.unit_price = Money.of("1.00")  # type: ignore[misc]
        with pytest.raises(dataclasses.FrozenInstanceError):
            line.selections = ()  # type: ignore[misc]

        assert cart.total() == Money.of("20.50")
        assert len(cart.lines()[0].selections) == 2

    def test_simple_line_rejected(self):
        line = CartLine("x", LineKind.SIMPLE, "coke", "Coca-Cola", Money.of("6"))
        with pytest.raises(ValidationError, match="expects a composed line"):
            _aggregator().add_composed(line)

    def test_duplicate_line_id_rejected(self):
        cart = _aggregator()
        line = _composed()
        cart.add_composed(line)
        with pytest.raises(ValidationError, match="already present"):
            cart.add_composed(line)


class TestAddSimple:

    def test_creates_simple_line(self):
        cart = _aggregator()
        line = cart.add_simple("coke")
        assert line.kind is LineKind.SIMPLE
        assert line.name == "Coca-Cola 350ml"
        assert line.unit_price == Money.of("6.00")
        assert line.quantity == Quantity(1)

    def test_same_entry_merges_into_one_line(self):
        cart = _aggregator()
        cart.add_simple("coke")
        cart.add_simple("coke")
        lines = cart.lines()
        assert len(lines) == 1
        assert lines[0].quantity == Quantity(2)
        assert cart.total() == Money.of("12.00")

    def test_merge_leaves_earlier_line_untouched(self):
        cart = _aggregator()
        first = cart.add_simple("coke")
        merged = cart.add_simple("coke")

        assert first.quantity == Quantity(1)
        assert merged.line_id == first.line_id
        assert merged.quantity == Quantity(2)

    def test_merge_with_explicit_quantity(self):
        cart = _aggregator()
        cart.add_simple("guarana", 2)
        cart.add_simple("guarana", 3)
        assert cart.lines()[0].quantity == Quantity(5)

    @pytest.mark.parametrize("entry_id", ["bacon", "base_burger"])
    def test_composable_entries_rejected(self, entry_id):
        cart = _aggregator()
        with pytest.raises(InvalidSimpleItem, match="through composition"):
            cart.add_simple(entry_id)
        assert cart.is_empty

    def test_non_positive_quantity_rejected(self):
        cart = _aggregator()
        cart.add_simple("coke")
        with pytest.raises(ValidationError, match="must be positive"):
            cart.add_simple("coke", 0)
        assert cart.lines()[0].quantity == Quantity(1)

    def test_unknown_entry_rejected(self):
        with pytest.raises(EntityNotFoundError):
            _aggregator().add_simple("beer")


class TestRemove:

    def test_removes_whole_line(self):
        cart = _aggregator()
        line = cart.add_simple("coke", 3)
        cart.remove(line.line_id)
        assert cart.is_empty
        assert cart.total() == Money.zero()

    def test_unknown_line_rejected(self):
        with pytest.raises(EntityNotFoundError, match="Cart line 'nope' not found"):
            _aggregator().remove("nope")

    def test_decrement_keeps_line_until_empty(self):
        cart = _aggregator()
        line = cart.add_simple("coke", 2)

        remaining = cart.decrement(line.line_id)
        assert remaining.quantity == Quantity(1)

        assert cart.decrement(line.line_id) is None
        assert cart.is_empty

    def test_decrement_more_than_held_rejected(self):
        cart = _aggregator()
        line = cart.add_simple("coke", 2)
        with pytest.raises(ValidationError, match="line holds 2"):
            cart.decrement(line.line_id, 3)
        assert cart.lines()[0].quantity == Quantity(2)


class TestLinesSnapshot:

    def test_insertion_order(self):
        cart = _aggregator()
        cart.add_simple("coke")
        cart.add_composed(_composed("bacon"))
        cart.add_simple("guarana")
        assert [l.entry_id for l in cart.lines()] == ["coke", "base_burger", "guarana"]

    def test_snapshot_is_detached(self):
        cart = _aggregator()
        cart.add_simple("coke")
        before = cart.lines()
        cart.add_simple("coke")
        assert before[0].quantity == Quantity(1)
        assert cart.lines()[0].quantity == Quantity(2)


class TestTotalInvariant:

    @pytest.mark.parametrize("seed", range(5))
    def test_total_is_sum_of_line_totals(self, seed):
        rng = random.Random(seed)
        cart = _aggregator()
        for step in range(30):
            op = rng.choice(["composed", "simple", "remove"])
            if op == "composed":
                addons = rng.sample(["lettuce", "bacon", "cheese"], rng.randint(0, 3))
                line = _composed(*addons, prefix=f"c{step}")
                cart.add_composed(line)
            elif op == "simple":
                cart.add_simple(rng.choice(["coke", "guarana"]), rng.randint(1, 3))
            elif not cart.is_empty:
                cart.remove(rng.choice(cart.lines()).line_id)

            expected = Money.sum(l.unit_price * l.quantity.value for l in cart.lines())
            assert cart.total() == expected


class TestCartAggregate:

    def test_rejects_second_simple_line_for_same_entry(self):
        cart = Cart()
        cart.append(CartLine("a", LineKind.SIMPLE, "coke", "Coca-Cola", Money.of("6")))
        with pytest.raises(ValidationError, match="increment it instead"):
            cart.append(CartLine("b", LineKind.SIMPLE, "coke", "Coca-Cola", Money.of("6")))

    def test_composed_line_quantity_is_fixed(self):
        line = _composed("bacon")
        with pytest.raises(ValidationError, match="cannot change quantity"):
            line.with_added_units(Quantity(1))
