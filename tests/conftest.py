from __future__ import annotations

import logging
from typing import Iterator

import pytest

from autocomponent.diagnostics import DiagnosticsCollector
from tests._fixtures.model_builder import ModelBuilder


@pytest.fixture
def builder() -> ModelBuilder:
    """Provide a fresh declaration model builder."""
    return ModelBuilder()


@pytest.fixture
def collector() -> DiagnosticsCollector:
    return DiagnosticsCollector()


@pytest.fixture
def restore_logger() -> Iterator[logging.Logger]:
    """Undo handler, level and propagation changes made to the package logger."""
    logger = logging.getLogger("autocomponent")
    handlers = list(logger.handlers)
    level, propagate = logger.level, logger.propagate
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate
