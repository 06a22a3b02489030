from __future__ import annotations

import pytest

from ocproj.config import Settings
from ocproj.store import ProjectStore

from .fakes import FakeClient


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def store(tmp_path):
    return ProjectStore(tmp_path)


@pytest.fixture
def settings(tmp_path):
    return Settings(cache_base=tmp_path, ignore_fzf=True)
