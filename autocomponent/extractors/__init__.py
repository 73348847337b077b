"""Directive extractors and the validation helpers they share."""

from .base import Extractor
from .component import ComponentExtractor, extract
from .scope import ScopeResolver
from .types import TypeReferenceValidator

__all__ = [
    "ComponentExtractor",
    "Extractor",
    "ScopeResolver",
    "TypeReferenceValidator",
    "extract",
]
