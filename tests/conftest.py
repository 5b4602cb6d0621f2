"""Shared test fixtures for all tests."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "bom"


@pytest.fixture
def sample_source_url() -> str:
    """Sample BoM observation document URL for testing."""
    return "http://www.bom.gov.au/fwo/IDN60901/IDN60901.94768.json"


@pytest.fixture
def sample_document_content() -> bytes:
    """Two-observation document for Sydney - Observatory Hill."""
    return (FIXTURES_DIR / "IDN60901.94768.json").read_bytes()
