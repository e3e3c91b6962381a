"""Shared pytest fixtures."""

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from study_helper.main import create_app
from study_helper.services.store import NoteStore


@pytest.fixture()
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "study.db"


@pytest.fixture()
def store(db_path: Path) -> Iterator[NoteStore]:
    """Initialized note store backed by a temporary SQLite file."""
    note_store = NoteStore(f"sqlite:///{db_path}")
    note_store.initialize()
    yield note_store
    note_store.close()


@pytest.fixture()
def mock_gateway() -> MagicMock:
    """Mock Gemini gateway; tests set generate.side_effect / return_value."""
    gateway = MagicMock()
    gateway.generate.return_value = "Generated text"
    return gateway


@pytest.fixture()
def client(db_path: Path, mock_gateway: MagicMock) -> Iterator[TestClient]:
    """TestClient over an app with a temporary store and the mock gateway."""
    app = create_app(store=NoteStore(f"sqlite:///{db_path}"), gateway=mock_gateway)
    with TestClient(app) as c:
        yield c
