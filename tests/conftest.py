"""Shared fixtures: a fresh datastore per test."""

import pytest

from stock import db


@pytest.fixture
def db_path(tmp_path):
    """Path of a datastore that does not exist yet."""
    return tmp_path / "stock.db"


@pytest.fixture
def conn(db_path):
    """An initialized connection on an empty products table."""
    connection = db.initialize(db_path)
    yield connection
    db.close(connection)
