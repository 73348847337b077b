"""Core data models shared across autocomponent components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

FIELD_TARGET = "target"
FIELD_FROM_TEMPLATE = "fromTemplate"
FIELD_DEPENDENCIES = "dependencies"
FIELD_MODULES = "modules"
FIELD_SUPERINTERFACES = "superinterfaces"

KIND_CLASS = "class"
KIND_ANNOTATION = "annotation"


@dataclass(frozen=True)
class TypeRef:
    """Reference to a genuine, already-existing type."""

    qualified_name: str

    @property
    def simple_name(self) -> str:
        return self.qualified_name.rsplit(".", 1)[-1]

    def __str__(self) -> str:
        return self.qualified_name


@dataclass(frozen=True)
class Declaration:
    """A declaration site: a class, or an annotation type applied to classes."""

    name: str
    kind: str = KIND_CLASS

    def as_type(self) -> TypeRef:
        return TypeRef(self.name)

    @property
    def is_annotation(self) -> bool:
        return self.kind == KIND_ANNOTATION

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class MarkerRef:
    """A marker annotation as attached to a particular declaration."""

    type: TypeRef
    site: Declaration

    def __str__(self) -> str:
        return f"@{self.type.simple_name}"


@dataclass(frozen=True)
class DirectiveField:
    """One entry of the fixed directive schema."""

    name: str
    kind: str

    @property
    def is_list(self) -> bool:
        return self.kind == "list"

    def default(self) -> object:
        return () if self.is_list else None


DIRECTIVE_SCHEMA: Tuple[DirectiveField, ...] = (
    DirectiveField(FIELD_TARGET, "single"),
    DirectiveField(FIELD_FROM_TEMPLATE, "single"),
    DirectiveField(FIELD_DEPENDENCIES, "list"),
    DirectiveField(FIELD_MODULES, "list"),
    DirectiveField(FIELD_SUPERINTERFACES, "list"),
)

SCHEMA_BY_NAME = {entry.name: entry for entry in DIRECTIVE_SCHEMA}


@dataclass(frozen=True)
class ComponentDescriptor:
    """Validated result of extracting one AutoComponent directive.

    ``element`` carries the directive; ``component_element`` is the declaration
    the generated component represents. They differ when the directive sits on
    an annotation type that is in turn applied to the component class.
    """

    element: Declaration
    component_element: Declaration
    target: TypeRef
    from_template: Optional[TypeRef] = None
    dependencies: Tuple[TypeRef, ...] = ()
    modules: Tuple[TypeRef, ...] = ()
    superinterfaces: Tuple[TypeRef, ...] = ()
    scope: Optional[MarkerRef] = None

    @property
    def is_scoped(self) -> bool:
        return self.scope is not None

    @property
    def uses_template(self) -> bool:
        return self.from_template is not None


__all__ = [
    "ComponentDescriptor",
    "Declaration",
    "DIRECTIVE_SCHEMA",
    "DirectiveField",
    "FIELD_DEPENDENCIES",
    "FIELD_FROM_TEMPLATE",
    "FIELD_MODULES",
    "FIELD_SUPERINTERFACES",
    "FIELD_TARGET",
    "KIND_ANNOTATION",
    "KIND_CLASS",
    "MarkerRef",
    "SCHEMA_BY_NAME",
    "TypeRef",
]
