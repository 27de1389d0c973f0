# tests/conftest.py
from __future__ import annotations

import pytest

from radixal.runtime import reset


@pytest.fixture()
def workspace(tmp_path, monkeypatch):
    """Point RADIXAL_HOME at an empty temp dir and start from a clean runtime."""
    home = tmp_path / "radixal_home"
    monkeypatch.setenv("RADIXAL_HOME", str(home))
    reset()
    yield home
    reset()
