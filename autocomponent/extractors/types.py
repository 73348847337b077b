"""Validation of raw directive values that must name an existing type."""

from __future__ import annotations

from typing import Any, Optional

from ..diagnostics import ElementErrors
from ..logging import get_logger
from ..models import TypeRef

GENERATED_CLASS_MESSAGE = (
    "{field} cannot reference generated class. "
    "Use the class that applies the @AutoComponent annotation."
)


class TypeReferenceValidator:
    """Rejects values that stand in for output of the current generation pass.

    The declaration model hands back a ``TypeRef`` only for types that already
    exist. A reference to a class this same pass will generate cannot be
    resolved yet and surfaces as anything else (typically the bare name).
    """

    def __init__(self, errors: ElementErrors) -> None:
        self.errors = errors
        self.logger = get_logger("extractors.types")

    def validate(self, raw_value: Any, field_name: str) -> bool:
        if isinstance(raw_value, TypeRef):
            return True
        self.logger.debug(
            "Rejected %r in %s on %s", raw_value, field_name, self.errors.site.name
        )
        self.errors.add_invalid(GENERATED_CLASS_MESSAGE.format(field=field_name))
        return False

    def coerce_single(self, raw_value: Any, field_name: str) -> Optional[TypeRef]:
        """Validate a single-valued field, treating an invalid value as absent."""
        if raw_value is None:
            return None
        if not self.validate(raw_value, field_name):
            return None
        return raw_value


__all__ = ["GENERATED_CLASS_MESSAGE", "TypeReferenceValidator"]
