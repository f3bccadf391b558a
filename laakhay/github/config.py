"""Shared GitHub client constants.

This module centralizes the API host and the default session settings so the
runtime and the endpoint catalog agree on them.
"""

from __future__ import annotations

BASE_URL = "https://api.github.com"

# GitHub rejects requests without a User-Agent header
DEFAULT_USER_AGENT = "laakhay-github"

# GitHub caps per_page at 100; larger values are sent as-is and clamped remotely
DEFAULT_PAGE_SIZE = 100
MAX_PAGE_SIZE = 100

DEFAULT_TIMEOUT = 30.0

AUTH_SCHEME = "token"
LINK_HEADER = "Link"
