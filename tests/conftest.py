"""Shared fixtures."""

import pytest


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep PORTFOLIO_* variables and stray .env files out of the tests."""
    for name in (
        "PORTFOLIO_PORT",
        "PORTFOLIO_SOCKET_PATH",
        "PORTFOLIO_STATIC_DIR",
        "PORTFOLIO_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
