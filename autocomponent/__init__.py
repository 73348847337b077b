"""Metadata extraction for @AutoComponent code generation."""

from .config import AutoComponentConfig, ConfigError, DiagnosticsConfig, LoggingConfig, load_config
from .declarations import DeclarationIndex, DeclarationModel, StaticDeclarationModel
from .diagnostics import (
    Diagnostic,
    DiagnosticsCollector,
    DiagnosticsError,
    ElementErrors,
    ExtractionError,
)
from .extractors import ComponentExtractor, ScopeResolver, TypeReferenceValidator, extract
from .models import ComponentDescriptor, Declaration, MarkerRef, TypeRef
from .processor import ComponentProcessor, ProcessingResult

__all__ = [
    "AutoComponentConfig",
    "ComponentDescriptor",
    "ComponentExtractor",
    "ComponentProcessor",
    "ConfigError",
    "Declaration",
    "DeclarationIndex",
    "DeclarationModel",
    "Diagnostic",
    "DiagnosticsCollector",
    "DiagnosticsConfig",
    "DiagnosticsError",
    "ElementErrors",
    "ExtractionError",
    "LoggingConfig",
    "MarkerRef",
    "ProcessingResult",
    "ScopeResolver",
    "StaticDeclarationModel",
    "TypeRef",
    "TypeReferenceValidator",
    "extract",
    "load_config",
]
