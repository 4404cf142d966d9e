import pytest
import sys
import os

# Add backend directory to Python path so imports work
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from app import create_app
from extensions import db as _db
from config import TestConfig
from mock_db import InMemoryDataService


@pytest.fixture(scope='session')
def app():
    """Create a Flask app configured for testing, backed by SQLAlchemy."""
    app = create_app(config_class=TestConfig)
    return app


@pytest.fixture(scope='function')
def db(app):
    """Create fresh database tables for each test function."""
    with app.app_context():
        _db.create_all()
        yield _db
        _db.session.rollback()
        _db.drop_all()


@pytest.fixture(scope='function')
def client(app, db):
    """A Flask test client with a clean database."""
    return app.test_client()


@pytest.fixture(scope='function')
def memory_service():
    """An empty in-memory data service with both tables registered."""
    return InMemoryDataService({'categories': [], 'words': []})


@pytest.fixture(scope='function')
def memory_client(memory_service):
    """A Flask test client whose resources read from memory_service."""
    app = create_app(config_class=TestConfig, data_service=memory_service)
    return app.test_client()
