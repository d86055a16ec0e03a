from __future__ import annotations

import pytest

from core.domain.models import ImportRecord


class StaticFetcher:
    """Fetcher double returning canned records (or raising)."""

    def __init__(self, resource_type: str, records=(), error: Exception | None = None) -> None:
        self.resource_type = resource_type
        self._records = list(records)
        self._error = error
        self.calls = 0

    async def fetch_data(self) -> list[ImportRecord]:
        self.calls += 1
        if self._error is not None:
            raise self._error
        return list(self._records)


@pytest.fixture
def make_fetcher():
    return StaticFetcher


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    # Keep the developer's own .env files and AUTH0_* variables out of tests.
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for key in ("AUTH0_DOMAIN", "AUTH0_ACCESS_TOKEN", "AUTH0_PAGE_SIZE", "AUTH0_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
