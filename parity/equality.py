"""
Structural equality engine.

deep_equal() decides whether two values have the same structure and
contents. Ordered sequences compare positionally, key/value containers
compare by key regardless of order, and records (and other objects with
fields) compare by their own visible fields. Hidden fields never take
part. A container never equals a value of a different container shape.

Reference cycles are not supported; recursion is bounded by
settings.MAX_DEPTH instead.
"""
import logging
from collections.abc import Mapping
from typing import Any

from config import settings
from parity.classification import are_both_nan, is_map_like, is_nan, is_object, is_sequence_like
from parity.errors import ComparisonDepthExceeded
from parity.fields import has_field_storage, has_own_field, own_keys

logger = logging.getLogger(__name__)


def get_field(value: Any, key: Any) -> Any:
    """Read a record field: mapping item or attribute."""
    if isinstance(value, Mapping):
        return value[key]
    return getattr(value, key)


def has_field(value: Any, key: Any) -> bool:
    """Whether `key` is one of the own, visible fields of `value`."""
    return has_own_field(value, key)


def _primitive_equal(a: Any, b: Any) -> bool:
    if is_object(a) or is_object(b):
        return False
    if a is None or b is None:
        return False
    # True must not equal 1; a single NaN never equals anything
    if isinstance(a, bool) != isinstance(b, bool):
        return False
    if is_nan(a) or is_nan(b):
        return False
    return a == b


def deep_equal(a: Any, b: Any) -> bool:
    """
    Recursively compare two values for structural equality.

    This handles:
    - None and primitives (NaN equals NaN, bool never equals int)
    - Ordered sequences (list, tuple, registered sequence containers)
    - Key/value containers (non-plain mappings, registered map containers)
    - Plain records and other objects with fields

    Raises:
        ComparisonDepthExceeded: if nesting goes past settings.MAX_DEPTH
    """
    return _deep_equal(a, b, 0)


def _deep_equal(a: Any, b: Any, depth: int) -> bool:
    if a is b:
        return True
    if are_both_nan(a, b):
        return True
    if not is_object(a) or not is_object(b):
        return _primitive_equal(a, b)

    if depth >= settings.MAX_DEPTH:
        logger.warning(f"Structural comparison aborted at depth {depth}")
        raise ComparisonDepthExceeded(settings.MAX_DEPTH)
    depth += 1

    a_is_sequence = is_sequence_like(a)
    a_is_map = is_map_like(a)
    if a_is_sequence != is_sequence_like(b):
        return False
    if a_is_map != is_map_like(b):
        return False

    if a_is_sequence:
        if len(a) != len(b):
            return False
        for index in range(len(a)):
            if not _deep_equal(a[index], b[index], depth):
                return False
        return True

    if a_is_map:
        if len(a) != len(b):
            return False
        for key in a.keys():
            if settings.STRICT_MAP_KEYS and key not in b:
                return False
            if not _deep_equal(a.get(key), b.get(key), depth):
                return False
        return True

    # Objects without field storage (datetime, set, ...) keep their own equality
    if not (has_field_storage(a) and has_field_storage(b)):
        return bool(a == b)

    keys = own_keys(a)
    if len(keys) != len(own_keys(b)):
        return False
    for key in keys:
        if not has_field(b, key):
            return False
        if not _deep_equal(get_field(a, key), get_field(b, key), depth):
            return False
    return True
