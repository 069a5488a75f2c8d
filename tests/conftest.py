"""Shared fixtures"""

import pytest
import typescale.config


@pytest.fixture(autouse=True)
def user_data_dir(tmp_path, monkeypatch):
    """Point ratio and preset lookups at an empty per-test data directory"""
    path = tmp_path / "user-data"
    monkeypatch.setenv("TYPESCALE_DATA_DIR", str(path))
    monkeypatch.setattr(typescale.config, "_scale_data", None)
    return path
