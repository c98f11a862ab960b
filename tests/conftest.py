"""Shared fixtures: an app wired to a throwaway static root.

The FastAPI lifespan (DB pool) is never entered here; user tests patch the
repository instead of talking to Postgres.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from core.config import Settings
from main import create_app

INDEX_HTML = "<html><body><h1>Welcome to Chirpy</h1></body></html>"


@pytest.fixture
def static_root(tmp_path: Path) -> Path:
    (tmp_path / "index.html").write_text(INDEX_HTML)
    (tmp_path / "assets").mkdir()
    (tmp_path / "assets" / "logo.txt").write_text("chirpy")
    return tmp_path


@pytest.fixture
def app(static_root: Path) -> FastAPI:
    return create_app(Settings(filepath_root=str(static_root), db_url=""))


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
