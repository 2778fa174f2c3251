"""Shared fixtures for endpoint and service tests."""
from __future__ import annotations

from collections.abc import Iterator

import pytest

from sdk_auth.core.config import Settings, get_settings
from sdk_auth.main import app

TEST_SECRET = "test-host-secret-with-enough-length-for-hs256"


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        _env_file=None,
        zoom_meeting_account_id="acct-123",
        zoom_meeting_host_key="host-key",
        zoom_meeting_host_secret=TEST_SECRET,
        zoom_oauth_token_url="https://zoom.test/oauth/token",
        zoom_api_base_url="https://api.zoom.test/v2",
    )


@pytest.fixture
def override_settings(test_settings: Settings) -> Iterator[Settings]:
    app.dependency_overrides[get_settings] = lambda: test_settings
    yield test_settings
    app.dependency_overrides.pop(get_settings, None)
