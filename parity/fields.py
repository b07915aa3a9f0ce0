"""
Own-field listing and hidden field annotation.

Other parts of the system attach bookkeeping state (administration
handles, capability markers) to the values they manage. Those fields
are "hidden": they stay addressable by name but never show up in
own_keys() and so never take part in structural equality.

Hidden field names are tracked in the object's own __hidden_fields__
mapping (field name -> writable flag). Objects without attribute
storage (an exact dict, __slots__-only instances, builtins) cannot
carry hidden fields; use Record when a dict-like record needs them.
"""
import inspect
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Iterable, Optional

from parity.errors import NotConfigurable


HIDDEN_ATTR = "__hidden_fields__"


class _Missing:
    def __repr__(self):
        return "MISSING"


MISSING = _Missing()


def _own_storage(value: Any) -> Optional[Mapping]:
    """Return the attribute dict of `value`, or None if it has none."""
    try:
        return vars(value)
    except TypeError:
        return None


def _define(value: Any, name: str, field_value: Any) -> None:
    # Bypasses Record.__setattr__, which would route the field into the mapping
    if isinstance(value, type):
        setattr(value, name, field_value)
    else:
        object.__setattr__(value, name, field_value)


def hidden_fields(value: Any) -> Mapping:
    """Read-only view of the hidden fields defined directly on `value`."""
    storage = _own_storage(value)
    if storage is None:
        return MappingProxyType({})
    return MappingProxyType(storage.get(HIDDEN_ATTR) or {})


def own_keys(value: Any) -> list:
    """
    List the own, visible keys of a record-like value in iteration order.

    Mappings list their keys. Objects with attribute storage list their
    instance attributes, minus hidden fields. Everything else has no
    own keys.
    """
    if isinstance(value, Mapping):
        # Iterating goes through the type, so hidden attributes cannot shadow it
        return list(value)
    storage = _own_storage(value)
    if storage is None:
        return []
    hidden = storage.get(HIDDEN_ATTR) or {}
    return [key for key in storage if key != HIDDEN_ATTR and key not in hidden]


def has_field_storage(value: Any) -> bool:
    """Whether `value` keeps its fields in a mapping or an attribute dict."""
    return isinstance(value, Mapping) or _own_storage(value) is not None


def has_own_field(value: Any, name: Any) -> bool:
    if isinstance(value, Mapping):
        return name in value
    return name in own_keys(value)


def is_field_configurable(value: Any, name: str) -> bool:
    """
    A field is configurable unless it was hidden as final, or the
    class exposes it through a read-only property.
    """
    hidden = hidden_fields(value)
    if name in hidden and not hidden[name]:
        return False
    descriptor = inspect.getattr_static(type(value), name, None)
    if isinstance(descriptor, property) and descriptor.fset is None:
        return False
    return True


def assert_field_configurable(value: Any, name: str) -> None:
    if not is_field_configurable(value, name):
        raise NotConfigurable(name, value)


def _current_value(value: Any, name: str) -> Any:
    if isinstance(value, Record) and name in value:
        return value[name]
    return getattr(value, name, None)


def hide(value: Any, name: str, initial: Any = MISSING, *, writable: bool = True) -> None:
    """
    Define `name` on `value` as a hidden field.

    Args:
        value: Object receiving the field. Must have attribute storage.
        name: Field name
        initial: Value to store. When omitted the field's current
            value is kept (None if it has none).
        writable: When False the field can not be hidden again
            afterwards. Plain assignment is only blocked on a Record;
            other objects and classes keep their normal __setattr__,
            so `Widget.isParityWidget = False` still goes through.

    Raises:
        NotConfigurable: if `value` has no attribute storage, or the
            field is final or backed by a read-only property.
    """
    storage = _own_storage(value)
    if storage is None:
        raise NotConfigurable(
            name, value,
            reason=f"Cannot hide field '{name}', {type(value).__name__} objects have no attribute storage"
        )
    assert_field_configurable(value, name)

    if initial is MISSING:
        initial = _current_value(value, name)
    if isinstance(value, Record) and name in value:
        del value[name]

    hidden = storage.get(HIDDEN_ATTR)
    if hidden is None:
        hidden = {}
        _define(value, HIDDEN_ATTR, hidden)
    _define(value, name, initial)
    hidden[name] = writable


def hide_final(value: Any, name: str, initial: Any = MISSING) -> None:
    """Hide a field and make it non-writable."""
    hide(value, name, initial, writable=False)


def make_hidden(value: Any, names: Iterable[str]) -> None:
    """Hide existing fields of `value`, keeping their current values."""
    for name in names:
        hide(value, name)


class Record(dict):
    """
    Plain dict-based record that can carry hidden fields.

    Visible fields are the mapping's keys. Hidden fields live in instance
    attributes, so they are reachable as ``record.name`` but are never
    keys of the mapping. Attribute access falls back to the mapping for
    everything else:

        >>> r = Record(x=1)
        >>> hide(r, "admin", object())
        >>> list(r), r.x
        (['x'], 1)
    """

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name, value):
        if name in hidden_fields(self):
            if not is_field_configurable(self, name):
                raise NotConfigurable(
                    name, self,
                    reason=f"Cannot assign to field '{name}', it is hidden and not writable"
                )
            object.__setattr__(self, name, value)
        else:
            self[name] = value

    def __delattr__(self, name):
        if name in hidden_fields(self):
            assert_field_configurable(self, name)
            object.__delattr__(self, name)
            del vars(self)[HIDDEN_ATTR][name]
            return
        try:
            del self[name]
        except KeyError:
            raise AttributeError(name) from None

    def __repr__(self):
        return f"Record({dict.__repr__(self)})"
