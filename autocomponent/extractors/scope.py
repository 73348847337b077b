"""Resolution of the single scope marker that applies to a component."""

from __future__ import annotations

from typing import Optional

from ..declarations import DeclarationModel
from ..diagnostics import ElementErrors
from ..logging import get_logger
from ..models import Declaration, MarkerRef
from .utils import query_model

SEVERAL_SCOPES_MESSAGE = (
    "Class annotated with @AutoComponent cannot have several scopes (@Scope)."
)


class ScopeResolver:
    """Finds the marker, itself tagged as scope-defining, to apply to the component.

    The directive-carrying element is scanned first. The component element is
    consulted only when the first scan finds nothing and the two differ.
    """

    def __init__(self, model: DeclarationModel, errors: ElementErrors) -> None:
        self.model = model
        self.errors = errors
        self.logger = get_logger("extractors.scope")

    def resolve(
        self, element: Declaration, component_element: Declaration
    ) -> Optional[MarkerRef]:
        marker = self._scan(element)
        if marker is None and element != component_element:
            marker = self._scan(component_element)
        if marker is None:
            self.logger.debug("No scope marker for %s", component_element.name)
        return marker

    def _scan(self, declaration: Declaration) -> Optional[MarkerRef]:
        found: Optional[MarkerRef] = None
        markers = query_model(
            declaration, "read markers", self.model.get_attached_markers, declaration
        )
        for marker in markers:
            scope_defining = query_model(
                declaration,
                f"inspect marker {marker}",
                self.model.is_marker_scope_defining,
                marker.type,
            )
            if not scope_defining:
                continue
            if found is not None:
                # Attributed to the declaration bearing the extra marker.
                self.errors.parent.add_invalid(declaration, SEVERAL_SCOPES_MESSAGE)
                continue
            found = marker
        return found


__all__ = ["SEVERAL_SCOPES_MESSAGE", "ScopeResolver"]
