"""Schema-driven helpers for reading raw directive values."""

from __future__ import annotations

from collections.abc import Mapping as AbcMapping, Set as AbcSet
from typing import Any, Callable, List, Mapping, Optional, TypeVar

from ..declarations import DeclarationModel
from ..diagnostics import ExtractionError
from ..models import SCHEMA_BY_NAME, Declaration

T = TypeVar("T")


def query_model(element: Declaration, action: str, call: Callable[..., T], *args: Any) -> T:
    """Run one declaration-model query, turning any failure into ExtractionError."""
    try:
        return call(*args)
    except ExtractionError:
        raise
    except Exception as exc:
        raise ExtractionError(f"Failed to {action} on {element.name}: {exc}", site=element) from exc


def read_directive(
    model: DeclarationModel, element: Declaration, directive_kind: str
) -> Mapping[str, Any]:
    """Return the raw field map of ``directive_kind`` on ``element``.

    Raises ExtractionError when the model cannot be queried or when the
    directive is not attached at all.
    """
    raw = query_model(
        element, f"read @{directive_kind}", model.get_attached_directive, element, directive_kind
    )
    if raw is None:
        raise ExtractionError(f"{element.name} is not annotated with @{directive_kind}", site=element)
    return raw


def unknown_fields(raw: Mapping[str, Any]) -> List[str]:
    """Return raw field names the directive schema does not define, sorted."""
    return sorted(name for name in raw if name not in SCHEMA_BY_NAME)


def get_value(raw: Mapping[str, Any], name: str) -> Any:
    """Look up a schema field, returning the schema default when it is absent."""
    entry = SCHEMA_BY_NAME[name]
    value = raw.get(name)
    if value is None:
        return entry.default()
    return value


def as_value_list(value: Any) -> Optional[List[Any]]:
    """Normalise a raw list-field value; a lone value counts as a one-element list.

    Returns None for unordered collections (sets, mappings), whose entries
    have no declaration order to preserve.
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    if isinstance(value, (AbcSet, AbcMapping)):
        return None
    return [value]


__all__ = ["as_value_list", "get_value", "query_model", "read_directive", "unknown_fields"]
