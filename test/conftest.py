"""
Pytest configuration and fixtures for Metabox tests
"""

import os
import sys

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH119, PTH120

from metabox.database import Base  # noqa: E402
from metabox.models import ItemMeta, SiteOption  # noqa: E402, F401
from metabox.registry import FieldRegistry  # noqa: E402
from metabox.services.meta_manager import MetaManager  # noqa: E402
from metabox.storage import InMemoryMetaStorage, SQLMetaStorage  # noqa: E402
from utils.mocks import RecordingMetaStorage  # noqa: E402


@pytest.fixture
def storage() -> InMemoryMetaStorage:
    return InMemoryMetaStorage(attachments={"7": "https://cdn.example.com/uploads/cat-300x200.jpg"})


@pytest.fixture
def recording_storage() -> RecordingMetaStorage:
    return RecordingMetaStorage()


@pytest.fixture
def registry() -> FieldRegistry:
    return FieldRegistry()


@pytest.fixture
def manager(storage, registry) -> MetaManager:
    return MetaManager(storage, registry=registry, css_prefix="dried", image_size="medium")


@pytest.fixture
def sql_session_factory():
    """Session factory over a fresh in-memory SQLite database."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def sql_storage(sql_session_factory) -> SQLMetaStorage:
    return SQLMetaStorage(sql_session_factory, attachment_url_template="/media/{attachment_id}/{size}")


@pytest.fixture
def client(manager):
    from main import create_app

    app = create_app(manager)
    with TestClient(app) as test_client:
        yield test_client
