"""Shared unit test fixtures."""

from __future__ import annotations

import logging

import pytest
import structlog


@pytest.fixture
def restore_logging():
    """Undo configure_logging: structlog defaults and the root logger's handlers and level."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)
