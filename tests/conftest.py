"""Shared fixtures for the User CRUD API tests."""

import pytest
from fastapi.testclient import TestClient

from user_crud_api.app.core.db import init_db
from user_crud_api.app.main import create_app
from user_crud_api.app.repositories.user_repository import SQLiteUserRepository


@pytest.fixture
def database_path(tmp_path):
    """Return the path of a freshly migrated SQLite database."""
    path = str(tmp_path / "users.db")
    init_db(path)
    return path


@pytest.fixture
def repository(database_path):
    """Return a repository on the temporary database."""
    return SQLiteUserRepository(database_path)


@pytest.fixture(name="client")
def client_fixture(repository):
    """Create a test client whose service uses the temporary database."""
    return TestClient(create_app(repository))
