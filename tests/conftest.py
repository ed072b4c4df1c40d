"""Pytest configuration and fixtures for memoria tests."""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from memoria.bot.context import InboundMessage


# --- Test database configuration ---

TEST_DB_NAME = "memoria_test"


@pytest.fixture
def clean_env(monkeypatch):
    """Remove MEMORIA_* variables so defaults and files are visible."""
    for key in list(os.environ.keys()):
        if key.startswith("MEMORIA_"):
            monkeypatch.delenv(key, raising=False)


# --- Sample data fixtures ---


@dataclass
class MockImage:
    """Mock ImageDocument for testing formatting and command handling."""

    id: str
    name: str
    link: str
    filename: str
    folder: Optional[str] = None
    created_at_human: Optional[str] = None
    updated_at_human: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)


@pytest.fixture
def sample_image():
    """Image stored in a folder, with timestamps and tags."""
    return MockImage(
        id="60a7f1c2",
        name="rowi_beach_day",
        link="https://cdn.example.com/cmx_20/rowi_beach_day.png",
        filename="rowi_beach_day.png",
        folder="cmx_20",
        created_at_human="05 March 2021 14:02:11",
        updated_at_human="06 March 2021 09:30:00",
        metadata={"hobby": "mangap", "artistName": "hiro"},
    )


@pytest.fixture
def sample_root_image():
    """Image at the library root with no timestamps or tags."""
    return MockImage(
        id="60a7f1c3",
        name="rowi",
        link="https://cdn.example.com/rowi.jpg",
        filename="rowi.jpg",
    )


@pytest.fixture
def sample_images(sample_image, sample_root_image):
    """List of search results."""
    return [sample_image, sample_root_image]


# --- Collaborator fixtures ---


@pytest.fixture
def make_message():
    """Factory for inbound messages with a recording send()."""

    def _make(content: str, attachments: int = 0) -> InboundMessage:
        return InboundMessage(
            content=content,
            send=AsyncMock(),
            attachments=attachments,
            channel="#images",
            author="alice",
        )

    return _make


@pytest.fixture
def search_fn():
    """Async search collaborator returning no images by default."""
    return AsyncMock(return_value=[])


@pytest.fixture
def log_fn():
    """Logging collaborator."""
    return MagicMock()


# --- Integration test markers ---


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests requiring external services (postgres, discord)"
    )


# --- Skip integration tests by default ---


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --run-integration is passed."""
    if config.getoption("--run-integration", default=False):
        return

    skip_integration = pytest.mark.skip(reason="Need --run-integration option to run")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run integration tests (requires postgres)",
    )
