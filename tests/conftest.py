"""
Global pytest fixtures and configuration for test suite.

This module provides reusable fixtures for:
- HTTP clients
- Mock settings/configuration
- Sample message data
- Temporary message files
"""

import os
from typing import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from emlx2json.api.app import app
from emlx2json.config import Settings
from tests.fixtures.messages import SAMPLE_MESSAGES


@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """
    Create async HTTP client for testing FastAPI endpoints.

    Yields:
        AsyncClient instance
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def mock_settings() -> Settings:
    """
    Create settings for testing with safe defaults.

    Returns:
        Settings instance with test configuration
    """
    return Settings(
        max_message_size_mb=1,
        log_level="INFO",
        log_json=False,  # Easier to read in tests
        summary_preview_chars=40,
    )


@pytest.fixture
def simple_message() -> str:
    """Minimal message: three headers and a one-line body."""
    return SAMPLE_MESSAGES["simple"]


@pytest.fixture
def emlx_plain() -> str:
    """Single-part Apple Mail .emlx with byte-count line and plist footer."""
    return SAMPLE_MESSAGES["emlx_plain"]


@pytest.fixture
def multipart_alternative() -> str:
    """multipart/alternative with quoted-printable text and HTML parts."""
    return SAMPLE_MESSAGES["multipart_alternative"]


@pytest.fixture
def nested_mixed() -> str:
    """multipart/mixed wrapping a multipart/alternative and an attachment."""
    return SAMPLE_MESSAGES["nested_mixed"]


@pytest.fixture
def encoded_subject() -> str:
    """Message whose Subject is folded over two encoded words."""
    return SAMPLE_MESSAGES["encoded_subject"]


@pytest.fixture
def tmp_emlx_file(tmp_path) -> Generator[str, None, None]:
    """
    Create temporary .emlx file for file-based tests.

    Args:
        tmp_path: pytest's temporary directory fixture

    Yields:
        Path to temporary .emlx file
    """
    emlx_path = tmp_path / "12345.emlx"
    emlx_path.write_bytes(SAMPLE_MESSAGES["emlx_plain"].replace("\n", "\r\n").encode("utf-8"))
    yield str(emlx_path)


@pytest.fixture(autouse=True)
def reset_env_vars():
    """
    Reset environment variables before each test.

    This prevents test pollution from env var changes.
    """
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config):
    """
    Configure pytest with custom markers and settings.
    """
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (API, end-to-end)"
    )
