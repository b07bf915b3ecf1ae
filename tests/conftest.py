"""
Shared test fixtures for the ads-txt-parser test suite.

Provides path resolution for the sample ads.txt files under tests/fixtures
and keeps settings isolated from the developer's environment.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
import structlog

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture()
def fixtures_dir() -> Path:
    """Return the absolute path to the test fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture()
def sample_ads_txt() -> Path:
    """A clean ads.txt: five records, six variables, comments and blank lines."""
    return FIXTURES_DIR / "ads.txt"


@pytest.fixture()
def broken_app_ads_txt() -> Path:
    """A CRLF app-ads.txt with three lines that are neither records nor variables."""
    return FIXTURES_DIR / "app-ads-broken.txt"


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop any ADS_TXT_* variables so AppSettings sees only what a test sets."""
    for name in list(os.environ):
        if name.startswith("ADS_TXT_"):
            monkeypatch.delenv(name)


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo any structlog configuration a test made (e.g. bound to a closed capture stream)."""
    yield
    structlog.reset_defaults()
