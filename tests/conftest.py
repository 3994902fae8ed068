"""Pytest configuration and shared fixtures for block adapter tests."""

import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from blockadapter.diagnostics import DiagnosticContext
from blockadapter.markup_parser import clear_parse_cache
from tests.fixtures import FOREVER_SCRIPT, create_event


@pytest.fixture(autouse=True)
def fresh_parse_cache():
    """Start every test with an empty parse cache."""
    clear_parse_cache()
    yield
    clear_parse_cache()


@pytest.fixture
def diag_ctx() -> DiagnosticContext:
    return DiagnosticContext(source="test")


@pytest.fixture
def forever_event() -> dict:
    return create_event(FOREVER_SCRIPT, block_id="hat")


@pytest.fixture
def markup_file(tmp_path) -> Path:
    path = tmp_path / "blocks.xml"
    path.write_text(FOREVER_SCRIPT, encoding="utf-8")
    return path
