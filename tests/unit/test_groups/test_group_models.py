#!/usr/bin/env python3
"""Tests for group domain models and their stored dict form."""

import pytest

from fairs.core.money import Money
from fairs.groups.models import (
    Group,
    Item,
    Person,
    SplitMode,
    TipMode,
    TipSpec,
    normalize_multiplier,
)


class TestNormalizeMultiplier:
    """Test quantity coercion."""

    @pytest.mark.parametrize(
        "value,expected",
        [(1, 1), (3, 3), (0, 1), (-2, 1), (None, 1), ("4", 4), ("0", 1), ("two", 1), (2.5, 1), (True, 1)],
    )
    def test_values(self, value, expected):
        assert normalize_multiplier(value) == expected


class TestItem:
    """Test Item model."""

    def test_line_cost(self):
        item = Item(id="a", name="Beer", price=Money.from_cents(500), multiplier=2)
        assert item.line_cost == Money.from_cents(1000)

    def test_from_dict_defaults_multiplier(self):
        item = Item.from_dict({"id": "a", "name": "Pizza", "price": "10.00"})
        assert item.multiplier == 1
        assert item.price == Money.from_cents(1000)

    def test_from_dict_bad_price_is_zero(self):
        item = Item.from_dict({"id": "a", "name": "Pizza", "price": "ten"})
        assert item.price == Money.zero()

    def test_numeric_id_becomes_string(self):
        assert Item.from_dict({"id": 1700000000000, "name": "A", "price": "1.00"}).id == "1700000000000"

    def test_to_dict_stores_fixed_point_price(self):
        item = Item(id="a", name="Pizza", price=Money.from_cents(850))
        assert item.to_dict() == {"id": "a", "name": "Pizza", "price": "8.50", "multiplier": 1}


class TestPerson:
    """Test Person model."""

    def test_from_dict(self):
        person = Person.from_dict({"id": "p", "name": "Ann", "selectedItems": ["a", "tip"], "isPaid": True})
        assert person.selected_items == ("a", "tip")
        assert person.is_paid
        assert person.shares_tip
        assert person.has_selected("a")

    def test_duplicate_references_are_dropped(self):
        person = Person.from_dict({"id": "p", "name": "Ann", "selectedItems": ["a", "b", "a"]})
        assert person.selected_items == ("a", "b")

    def test_missing_fields_default(self):
        person = Person.from_dict({"id": "p", "name": "Ann"})
        assert person.selected_items == ()
        assert not person.is_paid
        assert not person.shares_tip

    def test_to_dict(self):
        person = Person(id="p", name="Ann", selected_items=("tip",), is_paid=False)
        assert person.to_dict() == {"id": "p", "name": "Ann", "selectedItems": ["tip"], "isPaid": False}


class TestModes:
    """Test tip and split mode parsing."""

    def test_tip_mode_parse(self):
        assert TipMode.parse("percent") == TipMode.PERCENT
        assert TipMode.parse("money") == TipMode.MONEY
        assert TipMode.parse(None) == TipMode.MONEY
        assert TipMode.parse("weird") == TipMode.MONEY

    def test_split_mode_parse(self):
        assert SplitMode.parse("separate") == SplitMode.SEPARATE
        assert SplitMode.parse("equal") == SplitMode.EQUAL
        assert SplitMode.parse(None) == SplitMode.EQUAL


class TestGroup:
    """Test Group model."""

    def test_from_dict(self, dinner_group_dict):
        group = Group.from_dict(dinner_group_dict)
        assert group.name == "Friday dinner"
        assert len(group.items) == 2
        assert len(group.people) == 2
        assert group.tip == TipSpec("10", TipMode.PERCENT)
        assert group.split_mode == SplitMode.SEPARATE

    def test_round_trip(self, dinner_group_dict):
        group = Group.from_dict(dinner_group_dict)
        assert Group.from_dict(group.to_dict()) == group

    def test_to_dict_keeps_stored_shape(self, dinner_group_dict):
        data = Group.from_dict(dinner_group_dict).to_dict()
        assert data["tipValue"] == "10"
        assert data["tipMode"] == "percent"
        assert data["splitMode"] == "separate"
        assert data["items"][1] == {"id": "item-2", "name": "Beer", "price": "5.00", "multiplier": 2}

    def test_defaults_for_new_style_group(self):
        group = Group.from_dict({"id": "g", "name": "Lunch"})
        assert group.emoji == "beer"
        assert group.tip == TipSpec()
        assert group.split_mode == SplitMode.EQUAL
        assert group.items == ()

    def test_null_tip_value_is_empty(self):
        assert Group.from_dict({"id": "g", "name": "G", "tipValue": None}).tip.value == ""

    def test_find_item_and_person(self, dinner_group_dict):
        group = Group.from_dict(dinner_group_dict)
        assert group.find_item("item-1").name == "Pizza"
        assert group.find_item("nope") is None
        assert group.find_person("bob").name == "Bob"
        assert group.find_person("nope") is None

    def test_models_are_immutable(self, dinner_group_dict):
        group = Group.from_dict(dinner_group_dict)
        with pytest.raises(AttributeError):
            group.name = "Changed"  # type: ignore[misc]
