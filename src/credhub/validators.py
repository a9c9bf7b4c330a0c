"""Argument checks shared by the credential request builders.

Each helper raises before the caller touches any builder state, so a
failed call leaves the builder exactly as it was.
"""

from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Union

from src.credhub.config import Operation
from src.credhub.exceptions import InvalidArgumentError, InvalidStateError


def require_not_none(value: Any, field: str) -> Any:
    """Return ``value`` or raise if it is None.

    Raises:
        InvalidArgumentError: If value is None.
    """
    if value is None:
        raise InvalidArgumentError(f"{field} must not be null", field=field)
    return value


def require_unset(current: Any, message: str) -> None:
    """Raise if a single-assignment field already holds a value.

    Raises:
        InvalidStateError: If current is not None.
    """
    if current is not None:
        raise InvalidStateError(message)


def require_string(value: Any, field: str) -> str:
    """Validate a required string argument."""
    require_not_none(value, field)
    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"{field} must be a string, got {type(value).__name__}",
            field=field,
        )
    return value


def require_mapping(value: Any, field: str) -> Mapping:
    """Validate a required mapping argument."""
    require_not_none(value, field)
    if not isinstance(value, Mapping):
        raise InvalidArgumentError(
            f"{field} must be a mapping, got {type(value).__name__}",
            field=field,
        )
    return value


def resolve_operation(value: Optional[Union[Operation, str]]) -> Operation:
    """Coerce an Operation or its wire token into an Operation.

    Raises:
        InvalidArgumentError: If value is None or not a known operation.
    """
    require_not_none(value, "operation")
    if isinstance(value, Operation):
        return value
    try:
        return Operation.from_token(value)
    except ValueError:
        valid = ", ".join(op.value for op in Operation)
        raise InvalidArgumentError(
            f"Unknown operation: {value!r}. Expected one of: {valid}",
            field="operation",
        ) from None


def resolve_operations(values: Iterable[Union[Operation, str]]) -> List[Operation]:
    """Resolve a batch of operations, failing on the first bad entry."""
    return [resolve_operation(v) for v in values]
