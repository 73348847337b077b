"""Query interface onto the declaration model, plus an in-memory implementation."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, Set

from .models import KIND_CLASS, Declaration, MarkerRef, TypeRef


class DeclarationModel(Protocol):
    """Read-only view of declarations, their directives and their markers."""

    def get_attached_directive(
        self, declaration: Declaration, directive_kind: str
    ) -> Optional[Mapping[str, Any]]:
        """Return the raw field map of ``directive_kind`` on ``declaration``, if attached."""

    def get_attached_markers(self, declaration: Declaration) -> Sequence[MarkerRef]:
        """Return markers attached to ``declaration`` in declaration order."""

    def is_marker_scope_defining(self, marker_type: TypeRef) -> bool:
        """Return True when the marker's own type is tagged as scope-defining."""


class DeclarationIndex(DeclarationModel, Protocol):
    """Declaration model that can also enumerate every known declaration."""

    def declarations(self) -> List[Declaration]:
        """Return all declarations in declaration order."""


class StaticDeclarationModel:
    """Declaration model populated explicitly by a host or a test."""

    def __init__(self) -> None:
        self._declarations: Dict[str, Declaration] = {}
        self._directives: Dict[Declaration, Dict[str, Dict[str, Any]]] = {}
        self._markers: Dict[Declaration, List[MarkerRef]] = {}
        self._scope_defining: Set[TypeRef] = set()

    def declare(self, name: str, kind: str = KIND_CLASS) -> Declaration:
        existing = self._declarations.get(name)
        if existing is not None:
            if existing.kind != kind:
                raise ValueError(f"'{name}' is already declared as {existing.kind}")
            return existing
        declaration = Declaration(name=name, kind=kind)
        self._declarations[name] = declaration
        return declaration

    def attach_directive(
        self, declaration: Declaration, directive_kind: str, fields: Mapping[str, Any]
    ) -> None:
        self._register(declaration)
        self._directives.setdefault(declaration, {})[directive_kind] = dict(fields)

    def attach_marker(self, declaration: Declaration, marker_type: TypeRef) -> MarkerRef:
        self._register(declaration)
        marker = MarkerRef(type=marker_type, site=declaration)
        self._markers.setdefault(declaration, []).append(marker)
        return marker

    def mark_scope_defining(self, marker_type: TypeRef) -> None:
        self._scope_defining.add(marker_type)

    def annotated_with(self, directive_kind: str) -> List[Declaration]:
        """Return declarations carrying ``directive_kind``, in declaration order."""
        return [
            declaration
            for declaration in self._declarations.values()
            if directive_kind in self._directives.get(declaration, {})
        ]

    def declarations(self) -> List[Declaration]:
        return list(self._declarations.values())

    def get_attached_directive(
        self, declaration: Declaration, directive_kind: str
    ) -> Optional[Mapping[str, Any]]:
        fields = self._directives.get(declaration, {}).get(directive_kind)
        return dict(fields) if fields is not None else None

    def get_attached_markers(self, declaration: Declaration) -> Sequence[MarkerRef]:
        return tuple(self._markers.get(declaration, ()))

    def is_marker_scope_defining(self, marker_type: TypeRef) -> bool:
        return marker_type in self._scope_defining

    def _register(self, declaration: Declaration) -> None:
        existing = self._declarations.get(declaration.name)
        if existing is None:
            self._declarations[declaration.name] = declaration
        elif existing != declaration:
            raise ValueError(f"'{declaration.name}' is already declared as {existing.kind}")


__all__ = ["DeclarationIndex", "DeclarationModel", "StaticDeclarationModel"]
