"""Pytest configuration and fixtures for datum tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from loguru import logger

# Add the parent directory to sys.path so datum can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def log_records():
    """Enable datum logging and collect emitted loguru records."""
    records: list[dict] = []
    logger.enable("datum")
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
    logger.disable("datum")
