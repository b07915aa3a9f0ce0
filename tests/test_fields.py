"""Tests for own-key listing and hidden field annotation."""
from types import SimpleNamespace

import pytest

from parity import (
    NotConfigurable,
    ParityError,
    Record,
    assert_field_configurable,
    has_own_field,
    hidden_fields,
    hide,
    hide_final,
    is_field_configurable,
    make_hidden,
    own_keys,
)


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y


class Slotted:
    __slots__ = ("x",)

    def __init__(self, x):
        self.x = x


class Sized:
    @property
    def size(self):
        return 3


def test_own_keys_of_mappings_follow_insertion_order():
    assert own_keys({"b": 1, "a": 2}) == ["b", "a"]
    assert own_keys(Record(z=1, y=2)) == ["z", "y"]


def test_own_keys_of_objects_are_instance_attributes():
    assert own_keys(Point(1, 2)) == ["x", "y"]
    assert own_keys(SimpleNamespace(a=1)) == ["a"]


def test_own_keys_without_field_storage_is_empty():
    assert own_keys(Slotted(1)) == []
    assert own_keys(42) == []
    assert own_keys(None) == []


def test_hidden_field_is_excluded_but_addressable():
    p = Point(1, 2)
    hide(p, "admin", "bookkeeping")

    assert own_keys(p) == ["x", "y"]
    assert p.admin == "bookkeeping"
    assert dict(hidden_fields(p)) == {"admin": True}
    assert not has_own_field(p, "admin")
    assert has_own_field(p, "x")


def test_hide_keeps_current_value_when_initial_omitted():
    p = Point(1, 2)
    hide(p, "y")

    assert own_keys(p) == ["x"]
    assert p.y == 2


def test_hide_missing_field_without_initial_defaults_to_none():
    p = Point(1, 2)
    hide(p, "extra")
    assert p.extra is None


def test_record_hidden_field_is_not_a_key():
    r = Record(x=1)
    hide(r, "y", 5)

    assert own_keys(r) == ["x"]
    assert list(r) == ["x"]
    assert r.y == 5
    assert r == {"x": 1}


def test_record_hide_moves_visible_key_into_hidden_storage():
    r = Record(x=1, y=2)
    hide(r, "y")

    assert own_keys(r) == ["x"]
    assert "y" not in r
    assert r.y == 2


def test_record_attribute_access_maps_to_keys():
    r = Record()
    r.name = "value"

    assert r["name"] == "value"
    assert r.name == "value"
    del r.name
    assert "name" not in r
    with pytest.raises(AttributeError):
        r.name


def test_record_writable_hidden_field_can_be_reassigned():
    r = Record(x=1)
    hide(r, "counter", 0)
    r.counter = 1

    assert r.counter == 1
    assert own_keys(r) == ["x"]


def test_record_final_field_rejects_assignment_and_delete():
    r = Record(x=1)
    hide_final(r, "token", "abc")

    with pytest.raises(NotConfigurable):
        r.token = "other"
    with pytest.raises(NotConfigurable):
        del r.token
    assert r.token == "abc"


def test_record_delete_writable_hidden_field():
    r = Record()
    hide(r, "tmp", 1)
    del r.tmp

    assert "tmp" not in hidden_fields(r)
    with pytest.raises(AttributeError):
        r.tmp


def test_final_field_cannot_be_hidden_again():
    p = Point(1, 2)
    hide_final(p, "marker", True)

    assert not is_field_configurable(p, "marker")
    with pytest.raises(NotConfigurable) as exc:
        hide(p, "marker", False)
    assert exc.value.field == "marker"
    assert p.marker is True


def test_writable_hidden_field_can_be_redefined():
    p = Point(1, 2)
    hide(p, "handle", 1)
    hide(p, "handle", 2)
    assert p.handle == 2


def test_hide_on_plain_dict_is_not_configurable():
    with pytest.raises(NotConfigurable) as exc:
        hide({"x": 1}, "y", 2)
    assert "no attribute storage" in str(exc.value)
    assert isinstance(exc.value, AttributeError)
    assert isinstance(exc.value, ParityError)


def test_hide_on_slotted_object_is_not_configurable():
    with pytest.raises(NotConfigurable):
        hide(Slotted(1), "y", 2)


def test_read_only_property_is_not_configurable():
    sized = Sized()

    assert not is_field_configurable(sized, "size")
    with pytest.raises(NotConfigurable) as exc:
        assert_field_configurable(sized, "size")
    assert "'size'" in str(exc.value)
    with pytest.raises(NotConfigurable):
        hide(sized, "size", 4)


def test_make_hidden_keeps_values():
    ns = SimpleNamespace(a=1, b=2, c=3)
    make_hidden(ns, ["a", "b"])

    assert own_keys(ns) == ["c"]
    assert (ns.a, ns.b) == (1, 2)


def test_classes_can_carry_hidden_fields():
    class Tagged:
        pass

    hide_final(Tagged, "isThing", True)

    assert Tagged.isThing is True
    assert "isThing" in hidden_fields(Tagged)
    assert own_keys(Tagged()) == []


def test_hidden_field_named_like_a_dict_method_does_not_break_key_listing():
    r = Record(x=1)
    hide(r, "keys", object())

    assert own_keys(r) == ["x"]
    assert has_own_field(r, "x")
    assert not has_own_field(r, "keys")


def test_final_field_on_a_class_is_only_guarded_against_hiding_again():
    class Tagged:
        pass

    hide_final(Tagged, "isThing", True)

    with pytest.raises(NotConfigurable):
        hide(Tagged, "isThing", False)
    Tagged.isThing = False
    assert Tagged.isThing is False
