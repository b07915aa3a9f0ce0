"""
Capability tagging for container implementations.

A container class is made recognizable by attaching a hidden, final
marker attribute to the class itself. Instances inherit the marker, so
there is no per-instance cost, and the marker never appears among an
instance's own keys. The marker name depends only on the kind name,
so a class defined by a second copy of a module is still recognized.
"""
import logging
from typing import Any, Callable, Optional

from config import settings
from parity.classification import ContainerKind, is_object, registry
from parity.errors import invariant
from parity.fields import hidden_fields, hide_final

logger = logging.getLogger(__name__)


def marker_name(kind_name: str) -> str:
    """Name of the marker attribute for a nominal kind, e.g. 'isParityObservableMap'."""
    invariant(bool(kind_name) and kind_name.isidentifier(), "Kind name must be a valid identifier", kind_name)
    return f"is{settings.MARKER_PREFIX}{kind_name}"


def create_instanceof_predicate(kind_name: str, cls: type) -> Callable[[Any], bool]:
    """
    Tag `cls` with the capability marker for `kind_name`.

    Returns:
        Predicate that is True for instances of any class carrying the
        same marker, and False for everything else.
    """
    marker = marker_name(kind_name)
    if marker not in hidden_fields(cls):
        hide_final(cls, marker, True)
        logger.debug(f"Tagged {cls.__qualname__} with capability marker '{marker}'")

    def predicate(value: Any) -> bool:
        return is_object(value) and getattr(type(value), marker, None) is True

    predicate.__name__ = f"is_{kind_name}"
    predicate.__qualname__ = predicate.__name__
    return predicate


def tag_container(kind_name: str, container_kind: Optional[ContainerKind] = None):
    """
    Class decorator that tags a container class and registers it.

    The predicate is stored on the class as the hidden attribute
    `is_instance`. With a `container_kind` it is also registered with
    the shared registry so classify() and deep_equal() pick it up.

        @tag_container("ObservableMap", ContainerKind.MAP)
        class ObservableMap:
            ...
    """
    def decorate(cls):
        predicate = create_instanceof_predicate(kind_name, cls)
        if "is_instance" not in hidden_fields(cls):
            hide_final(cls, "is_instance", staticmethod(predicate))
        if container_kind is not None:
            registry.register(container_kind, predicate)
        return cls

    return decorate
