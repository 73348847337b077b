"""Host loop that extracts every @AutoComponent declaration in a model."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from .config import DEFAULT_DIRECTIVE, AutoComponentConfig, DiagnosticsConfig, load_config
from .declarations import DeclarationIndex
from .diagnostics import SEVERITY_ERROR, Diagnostic, DiagnosticsCollector, ExtractionError
from .extractors import ComponentExtractor
from .extractors.utils import query_model
from .logging import configure_logging, get_logger
from .models import ComponentDescriptor, Declaration

UNSCOPED_MESSAGE = "Component has no scope annotation (@Scope) and will be generated unscoped."


@dataclass
class ProcessingResult:
    """Descriptors extracted during a run, with everything diagnosed along the way."""

    descriptors: List[ComponentDescriptor] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return any(entry.severity == SEVERITY_ERROR for entry in self.diagnostics)


class ComponentProcessor:
    """Drives extraction for each declaration carrying the directive.

    A directive placed on an annotation type applies to every class that
    annotation is attached to; each of those classes yields its own component.
    """

    def __init__(
        self,
        model: DeclarationIndex,
        config: AutoComponentConfig | None = None,
        collector: DiagnosticsCollector | None = None,
    ) -> None:
        self.model = model
        self.directive = config.directive if config is not None else DEFAULT_DIRECTIVE
        self.settings = config.diagnostics if config is not None else DiagnosticsConfig()
        self.collector = collector or DiagnosticsCollector()
        self.logger = get_logger("processor")

    @classmethod
    def from_config(
        cls,
        model: DeclarationIndex,
        config_path: Path,
        collector: DiagnosticsCollector | None = None,
    ) -> "ComponentProcessor":
        """Build a processor from .autocomponent.yml and apply its logging settings."""
        config = load_config(config_path)
        configure_logging(verbose=config.logging.verbose, log_file=config.logging.log_file)
        return cls(model, config, collector)

    def process(self) -> ProcessingResult:
        result = ProcessingResult()
        pairs = self._component_pairs()
        self.logger.info("Processing %d @%s component(s)", len(pairs), self.directive)

        for element, component_element in pairs:
            descriptor = self._extract_one(element, component_element)
            if descriptor is None:
                continue
            if not descriptor.is_scoped and self.settings.warn_unscoped:
                self.collector.add_warning(component_element, UNSCOPED_MESSAGE)
            result.descriptors.append(descriptor)

        result.diagnostics = self.collector.diagnostics
        self.logger.info(
            "Extracted %d descriptor(s) with %d error(s)",
            len(result.descriptors),
            len(self.collector.errors),
        )
        if self.settings.fail_on_error:
            self.collector.raise_if_invalid()
        return result

    def _extract_one(
        self, element: Declaration, component_element: Declaration
    ) -> Optional[ComponentDescriptor]:
        try:
            extractor = ComponentExtractor(
                component_element,
                element,
                self.model,
                self.collector.for_site(element),
                directive_kind=self.directive,
            )
        except ExtractionError as exc:
            # Already recorded by the extractor; other declarations carry on.
            self.logger.debug("Skipping %s: %s", component_element.name, exc)
            return None
        return extractor.descriptor()

    def _component_pairs(self) -> List[Tuple[Declaration, Declaration]]:
        """Return ``(element, component_element)`` pairs in declaration order.

        A declaration whose model queries fail is recorded and left out; the
        remaining declarations are still paired.
        """
        pairs: List[Tuple[Declaration, Declaration]] = []
        declarations = self.model.declarations()
        for element in declarations:
            try:
                raw = query_model(
                    element,
                    f"read @{self.directive}",
                    self.model.get_attached_directive,
                    element,
                    self.directive,
                )
            except ExtractionError as exc:
                self.collector.add_invalid(element, str(exc))
                continue
            if raw is None:
                continue
            if not element.is_annotation:
                pairs.append((element, element))
                continue
            applied = [
                candidate
                for candidate in declarations
                if not candidate.is_annotation and self._is_applied(element, candidate)
            ]
            if not applied:
                self.logger.debug("@%s is not applied to any class", element.name)
            pairs.extend((element, candidate) for candidate in applied)
        return pairs

    def _is_applied(self, annotation: Declaration, candidate: Declaration) -> bool:
        try:
            markers = query_model(
                candidate, "read markers", self.model.get_attached_markers, candidate
            )
        except ExtractionError as exc:
            self.collector.add_invalid(candidate, str(exc))
            return False
        return any(marker.type == annotation.as_type() for marker in markers)


__all__ = ["ComponentProcessor", "ProcessingResult", "UNSCOPED_MESSAGE"]
