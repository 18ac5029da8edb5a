"""Shared pytest fixtures."""

import pytest

from identgen.core.modules.ident.generator import IdentGen


@pytest.fixture
def abc_gen():
    """Create a generator over the three symbol table `abc`."""
    return IdentGen("abc")


@pytest.fixture
def state_path(tmp_path):
    """Path of a state file that doesn't exist yet."""
    return tmp_path / "state.json"


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run with no IDENTGEN_* variables and no .env file in the working directory."""
    for name in ("IDENTGEN_DEBUG", "IDENTGEN_TABLE", "IDENTGEN_STATE_PATH"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
