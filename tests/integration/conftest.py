"""Shared fixtures for integration tests."""

import os

import pytest


@pytest.fixture
def github_token() -> str | None:
    """Optional token from GITHUB_TOKEN; anonymous requests are rate limited harder."""
    return os.environ.get("GITHUB_TOKEN") or None
