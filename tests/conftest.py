"""Shared fixtures for the tater test-suite."""

from pathlib import Path

import pytest

from tater import Tater
from tater.logging import configure_logging

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    """Install the test logging configuration (all output suppressed)."""
    configure_logging()


@pytest.fixture
def fixtures_dir():
    """Directory holding the YAML and Python message fixtures."""
    return FIXTURES_DIR


@pytest.fixture
def tater(fixtures_dir):
    """Tater loaded from the fixtures with English active."""
    return Tater(path=fixtures_dir, locale="en")


@pytest.fixture
def tater_fr(fixtures_dir):
    """Tater loaded from the fixtures with French active."""
    return Tater(path=fixtures_dir, locale="fr")
