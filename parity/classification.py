"""
Value classification for structural comparison.

Every value falls in exactly one Classification. Ordered sequences and
key/value containers are recognized either natively (list/tuple and
Mapping) or through capability predicates registered by container
implementations that live outside this package. The classifier never
names those implementations directly.
"""
import cmath
import inspect
import logging
import math
import numbers
import threading
from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from types import SimpleNamespace
from typing import Any, Callable

from parity.errors import UnsupportedShape
from parity.fields import Record, own_keys

logger = logging.getLogger(__name__)

Predicate = Callable[[Any], bool]

_PRIMITIVE_TYPES = (str, bytes, bytearray, numbers.Number, Enum)
_NATIVE_SEQUENCE_TYPES = (list, tuple)
_PLAIN_RECORD_TYPES = (dict, SimpleNamespace)


class Classification(str, Enum):
    NULL = "null"
    PRIMITIVE = "primitive"
    ORDERED_SEQUENCE = "ordered_sequence"
    KEY_VALUE_CONTAINER = "key_value_container"
    PLAIN_RECORD = "plain_record"
    OPAQUE = "opaque"


class ContainerKind(str, Enum):
    SEQUENCE = "sequence"
    MAP = "map"


class CapabilityRegistry:
    """
    Capability predicates, keyed by container kind.

    Registration normally happens once, while container modules are
    imported. Readers get an immutable snapshot so a comparison never
    observes a half-finished registration.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._predicates: dict[ContainerKind, tuple[Predicate, ...]] = {
            kind: () for kind in ContainerKind
        }

    def register(self, kind: ContainerKind, predicate: Predicate) -> Predicate:
        kind = ContainerKind(kind)
        with self._lock:
            current = self._predicates[kind]
            if predicate not in current:
                self._predicates[kind] = current + (predicate,)
        logger.debug(f"Registered {kind.value} predicate {getattr(predicate, '__name__', predicate)}")
        return predicate

    def unregister(self, kind: ContainerKind, predicate: Predicate) -> None:
        kind = ContainerKind(kind)
        with self._lock:
            self._predicates[kind] = tuple(p for p in self._predicates[kind] if p is not predicate)

    def predicates(self, kind: ContainerKind) -> tuple[Predicate, ...]:
        return self._predicates[ContainerKind(kind)]

    def matches(self, kind: ContainerKind, value: Any) -> bool:
        return any(predicate(value) for predicate in self.predicates(kind))


registry = CapabilityRegistry()


def is_primitive(value: Any) -> bool:
    """Strings, bytes, numbers, enum members, routines and classes."""
    return (
        isinstance(value, _PRIMITIVE_TYPES)
        or inspect.isroutine(value)
        or isinstance(value, type)
    )


def is_object(value: Any) -> bool:
    return value is not None and not is_primitive(value)


def is_plain_record(value: Any) -> bool:
    return type(value) in _PLAIN_RECORD_TYPES or isinstance(value, Record)


def is_native_map(value: Any) -> bool:
    """A Mapping that is not a plain record, e.g. OrderedDict or MappingProxyType."""
    return isinstance(value, Mapping) and not is_plain_record(value)


def is_sequence_like(value: Any) -> bool:
    """Whether `value` is an ordered sequence, native or registered."""
    return isinstance(value, _NATIVE_SEQUENCE_TYPES) or (
        is_object(value) and registry.matches(ContainerKind.SEQUENCE, value)
    )


def is_map_like(value: Any) -> bool:
    """Whether `value` is a key/value container, native or registered."""
    return is_native_map(value) or (
        is_object(value) and registry.matches(ContainerKind.MAP, value)
    )


def classify(value: Any) -> Classification:
    if value is None:
        return Classification.NULL
    if not is_object(value):
        return Classification.PRIMITIVE
    # Sequences first: a registered sequence may also look like a generic object
    if is_sequence_like(value):
        return Classification.ORDERED_SEQUENCE
    if is_map_like(value):
        return Classification.KEY_VALUE_CONTAINER
    if is_plain_record(value):
        return Classification.PLAIN_RECORD
    return Classification.OPAQUE


def is_nan(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Number):
        return False
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, complex):
        return cmath.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    return value != value


def are_both_nan(a: Any, b: Any) -> bool:
    return is_nan(a) and is_nan(b)


def get_map_like_keys(value: Any) -> list:
    """
    Canonical key list of a map-like value.

    Accepts a plain record (own keys), a list/tuple of key/value pairs
    (first element of each pair, duplicates kept) or a key/value
    container (its key enumeration). Order follows each shape's own
    iteration order.

    Raises:
        UnsupportedShape: for any other value
    """
    if is_plain_record(value):
        return own_keys(value)
    if isinstance(value, _NATIVE_SEQUENCE_TYPES):
        keys = []
        for pair in value:
            if not isinstance(pair, _NATIVE_SEQUENCE_TYPES) or len(pair) != 2:
                raise UnsupportedShape(value)
            keys.append(pair[0])
        return keys
    if is_map_like(value):
        return list(value.keys())
    raise UnsupportedShape(value)
