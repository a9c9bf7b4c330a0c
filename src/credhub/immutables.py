"""Read-only snapshots of builder state."""

import copy
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")

_EMPTY: Tuple = ()


def freeze_sequence(items: Optional[Sequence[T]]) -> Tuple[T, ...]:
    """Snapshot an accumulated sequence as a tuple.

    Zero items share one empty tuple, a single item gets a one-element
    tuple, anything larger is copied. The result never aliases ``items``.
    """
    count = 0 if items is None else len(items)
    if count == 0:
        return _EMPTY
    if count == 1:
        return (items[0],)
    return tuple(items)


def freeze_mapping(mapping: Mapping) -> Mapping:
    """Deep-copy a mapping into read-only form, nested values included.

    Nested mappings become read-only views, lists and tuples become
    tuples, sets become frozensets. :func:`thaw` reverses this.
    """
    return MappingProxyType({k: _freeze(v) for k, v in mapping.items()})


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return freeze_mapping(value)
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(_freeze(v) for v in value)
    return copy.deepcopy(value)


def thaw(value: Any) -> Any:
    """Return a plain, mutable deep copy of a (possibly frozen) value."""
    if isinstance(value, Mapping):
        return {k: thaw(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [thaw(v) for v in value]
    return copy.deepcopy(value)


def hashable(value: Any) -> Any:
    """Convert nested dicts, lists and sets into a hashable equivalent."""
    if isinstance(value, Mapping):
        return frozenset((k, hashable(v)) for k, v in value.items())
    if isinstance(value, (list, tuple)):
        return tuple(hashable(v) for v in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(hashable(v) for v in value)
    return value
