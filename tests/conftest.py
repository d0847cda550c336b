"""Pytest configuration and fixtures for ord tests."""

import os

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Clear ORD-related environment variables before each test."""
    for key in list(os.environ.keys()):
        if key.startswith("ORD_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def fake_home(tmp_path, monkeypatch):
    """Point home and data directory lookups at a temporary directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_DATA_HOME", str(home / ".local" / "share"))
    return home
