"""Base class for directive extractors."""

from abc import ABC, abstractmethod

from ..declarations import DeclarationModel
from ..diagnostics import ElementErrors
from ..models import Declaration


class Extractor(ABC):
    """Reads one directive off one declaration, reporting problems to ``errors``."""

    def __init__(
        self, element: Declaration, model: DeclarationModel, errors: ElementErrors
    ) -> None:
        self.element = element
        self.model = model
        self.errors = errors

    @abstractmethod
    def extract(self) -> None:
        """Populate the extractor's state from the declaration model."""
