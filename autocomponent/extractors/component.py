"""Extraction of @AutoComponent directives into component descriptors."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Tuple

from ..config import DEFAULT_DIRECTIVE
from ..declarations import DeclarationModel
from ..diagnostics import DiagnosticsCollector, ElementErrors, ExtractionError
from ..logging import get_logger
from ..models import (
    FIELD_DEPENDENCIES,
    FIELD_FROM_TEMPLATE,
    FIELD_MODULES,
    FIELD_SUPERINTERFACES,
    FIELD_TARGET,
    ComponentDescriptor,
    Declaration,
    MarkerRef,
    TypeRef,
)
from .base import Extractor
from .scope import ScopeResolver
from .types import TypeReferenceValidator
from .utils import as_value_list, get_value, read_directive, unknown_fields

TEMPLATE_CONFLICT_MESSAGE = (
    "Cannot have fromTemplate with dependencies/superinterfaces/modules at the same time"
)
UNKNOWN_FIELD_MESSAGE = "{field} is not a member of @{directive} and was ignored."
UNORDERED_MESSAGE = "{field} must be an ordered list of classes, not an unordered collection."


class ComponentExtractor(Extractor):
    """Reads @AutoComponent off ``element`` for the component ``component_element``.

    ``component_element`` is either ``element`` itself, or the class an
    annotation type is applied to when @AutoComponent sits on that annotation.
    Extraction happens in the constructor; afterwards the extractor is
    read-only.
    """

    def __init__(
        self,
        component_element: Declaration,
        element: Declaration,
        model: DeclarationModel,
        errors: ElementErrors,
        *,
        directive_kind: str = DEFAULT_DIRECTIVE,
    ) -> None:
        super().__init__(element, model, errors)
        self.component_element = component_element
        self.directive_kind = directive_kind
        self.logger = get_logger("extractors.component")
        self._validator = TypeReferenceValidator(errors)
        self._target: TypeRef = component_element.as_type()
        self._from_template: Optional[TypeRef] = None
        self._dependencies: Tuple[TypeRef, ...] = ()
        self._modules: Tuple[TypeRef, ...] = ()
        self._superinterfaces: Tuple[TypeRef, ...] = ()
        self._scope: Optional[MarkerRef] = None

        self.extract()

    def extract(self) -> None:
        try:
            raw = read_directive(self.model, self.element, self.directive_kind)
        except ExtractionError as exc:
            self.errors.add_invalid(str(exc))
            raise

        for name in unknown_fields(raw):
            self.errors.add_invalid(
                UNKNOWN_FIELD_MESSAGE.format(field=name, directive=self.directive_kind)
            )

        target = self._validator.coerce_single(get_value(raw, FIELD_TARGET), FIELD_TARGET)
        if target is not None:
            self._target = target

        self._from_template = self._validator.coerce_single(
            get_value(raw, FIELD_FROM_TEMPLATE), FIELD_FROM_TEMPLATE
        )
        self._dependencies = self._find_types(raw, FIELD_DEPENDENCIES)
        self._modules = self._find_types(raw, FIELD_MODULES)
        self._superinterfaces = self._find_types(raw, FIELD_SUPERINTERFACES)
        try:
            self._scope = ScopeResolver(self.model, self.errors).resolve(
                self.element, self.component_element
            )
        except ExtractionError as exc:
            self.errors.parent.add_invalid(exc.site or self.element, str(exc))
            raise

        if self._from_template is not None and (
            self._dependencies or self._modules or self._superinterfaces
        ):
            self.errors.add_invalid(TEMPLATE_CONFLICT_MESSAGE)

        self.logger.debug(
            "Extracted %s: target=%s dependencies=%d modules=%d superinterfaces=%d scope=%s",
            self.component_element.name,
            self._target,
            len(self._dependencies),
            len(self._modules),
            len(self._superinterfaces),
            self._scope,
        )

    def _find_types(self, raw: Mapping[str, Any], name: str) -> Tuple[TypeRef, ...]:
        types: List[TypeRef] = []
        values = as_value_list(get_value(raw, name))
        if values is None:
            self.errors.add_invalid(UNORDERED_MESSAGE.format(field=name))
            return ()
        for value in values:
            if not self._validator.validate(value, name):
                continue
            types.append(value)
        return tuple(types)

    @property
    def target(self) -> TypeRef:
        return self._target

    @property
    def from_template(self) -> Optional[TypeRef]:
        return self._from_template

    @property
    def dependencies(self) -> Tuple[TypeRef, ...]:
        return self._dependencies

    @property
    def modules(self) -> Tuple[TypeRef, ...]:
        return self._modules

    @property
    def superinterfaces(self) -> Tuple[TypeRef, ...]:
        return self._superinterfaces

    @property
    def scope(self) -> Optional[MarkerRef]:
        return self._scope

    def descriptor(self) -> ComponentDescriptor:
        return ComponentDescriptor(
            element=self.element,
            component_element=self.component_element,
            target=self.target,
            from_template=self._from_template,
            dependencies=self._dependencies,
            modules=self._modules,
            superinterfaces=self._superinterfaces,
            scope=self._scope,
        )


def extract(
    element: Declaration,
    component_element: Declaration,
    model: DeclarationModel,
    collector: DiagnosticsCollector,
    *,
    directive_kind: str = DEFAULT_DIRECTIVE,
) -> ComponentDescriptor:
    """Extract one directive, recording diagnostics on ``collector``."""
    extractor = ComponentExtractor(
        component_element,
        element,
        model,
        collector.for_site(element),
        directive_kind=directive_kind,
    )
    return extractor.descriptor()


__all__ = [
    "ComponentExtractor",
    "TEMPLATE_CONFLICT_MESSAGE",
    "UNKNOWN_FIELD_MESSAGE",
    "UNORDERED_MESSAGE",
    "extract",
]
