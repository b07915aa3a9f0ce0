# Parity v1.2.0
"""
Parity - structural equality and container classification.

Contains the value classifier, map-shape normalizer, hidden field
annotation, capability tagging and the structural equality engine.
"""
from parity.errors import (
    ParityError,
    UnsupportedShape,
    NotConfigurable,
    ComparisonDepthExceeded,
    invariant,
    fail
)
from parity.fields import (
    MISSING,
    Record,
    own_keys,
    has_own_field,
    has_field_storage,
    hidden_fields,
    hide,
    hide_final,
    make_hidden,
    is_field_configurable,
    assert_field_configurable
)
from parity.classification import (
    Classification,
    ContainerKind,
    CapabilityRegistry,
    registry,
    classify,
    is_object,
    is_primitive,
    is_plain_record,
    is_native_map,
    is_sequence_like,
    is_map_like,
    is_nan,
    are_both_nan,
    get_map_like_keys
)
from parity.capability import (
    marker_name,
    create_instanceof_predicate,
    tag_container
)
from parity.equality import (
    deep_equal,
    get_field,
    has_field
)

__all__ = [
    "ParityError",
    "UnsupportedShape",
    "NotConfigurable",
    "ComparisonDepthExceeded",
    "invariant",
    "fail",
    "MISSING",
    "Record",
    "own_keys",
    "has_own_field",
    "has_field_storage",
    "hidden_fields",
    "hide",
    "hide_final",
    "make_hidden",
    "is_field_configurable",
    "assert_field_configurable",
    "Classification",
    "ContainerKind",
    "CapabilityRegistry",
    "registry",
    "classify",
    "is_object",
    "is_primitive",
    "is_plain_record",
    "is_native_map",
    "is_sequence_like",
    "is_map_like",
    "is_nan",
    "are_both_nan",
    "get_map_like_keys",
    "marker_name",
    "create_instanceof_predicate",
    "tag_container",
    "deep_equal",
    "get_field",
    "has_field"
]
