from __future__ import annotations

import importlib
from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for imports like `import persistence...` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def sandbox_project(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Redirect persistence paths to a temp project directory so tests never touch real ./data.
    """
    import persistence.paths as paths

    def _project_root() -> Path:
        return tmp_path

    monkeypatch.setattr(paths, "project_root", _project_root)
    monkeypatch.setenv("BOOKMARK_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("BOOKMARK_DOCUMENT_FILE", raising=False)
    monkeypatch.delenv("MAX_BODY_BYTES", raising=False)
    return tmp_path


@pytest.fixture
def document_path(sandbox_project: Path) -> Path:
    return sandbox_project / "data" / "bookmark.json"


@pytest.fixture
def reload_endpoints(sandbox_project: Path) -> None:
    """
    Endpoints create repo singletons and read settings at import time; reload after sandboxing paths.
    """
    import endpoints.db_endpoints as db_endpoints

    importlib.reload(db_endpoints)


@pytest.fixture
def client(reload_endpoints):
    from fastapi.testclient import TestClient

    import app as app_module

    with TestClient(app_module.create_app()) as c:
        yield c
