"""Value helpers for model XML generation.

This module re-exports the shared qualified-name helpers and decides which
property values count as absent and how scalars are written as text.
"""

from collections.abc import Sequence
from typing import Any, cast

import pandas as pd

from modelxml.domain.entities.metamodel import Instance

from ..exceptions import UnresolvedTypeError
from ..xml_utils import qualified, split_qualified


def is_null(value: object) -> bool:
    """Check if a property value is absent.

    Args:
        value: Value to check

    Returns:
        True for None, NaN/NA/NaT, the empty string and empty collections
    """

    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    try:
        return bool(pd.isna(cast(Any, value)))
    except (TypeError, ValueError):
        return False


def items_of(value: object) -> Sequence[object]:
    """Return the non-null items of a collection value, in insertion order.

    A single value supplied for a collection property is treated as a
    one-item collection.
    """
    if isinstance(value, (list, tuple)):
        return [item for item in value if not is_null(item)]
    return [] if is_null(value) else [value]


def format_value(value: object) -> str:
    """Format a scalar value as XML text.

    Args:
        value: Value to format

    Returns:
        ``true``/``false`` for booleans, up to 15 significant digits for
        floats and ``str(value)`` otherwise

    Raises:
        UnresolvedTypeError: If ``value`` is a model instance
    """

    if isinstance(value, Instance):
        raise UnresolvedTypeError(
            f"{value.type_name} instance cannot be written as a scalar value"
        )
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format(value, ".15g")
    return str(value)


__all__ = [
    "format_value",
    "is_null",
    "items_of",
    "qualified",
    "split_qualified",
]
