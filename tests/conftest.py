"""Shared test fixtures for leetup-engine."""

import json
from pathlib import Path

import pytest

from leetup_engine.config import load_config
from leetup_engine.models import ProblemStub

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def isolated_data_dir(tmp_path, monkeypatch):
    """Keep config and cache lookups away from the real ~/.leetup."""
    data = tmp_path / ".leetup"
    monkeypatch.setenv("LEETUP_DATA_DIR", str(data))
    monkeypatch.delenv("LEETUP_CONFIG", raising=False)
    return data


@pytest.fixture
def two_sum():
    return ProblemStub.from_dict(json.loads((FIXTURES / "two-sum.json").read_text()))


@pytest.fixture
def config():
    return load_config(FIXTURES / "config.yaml")
