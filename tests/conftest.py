import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from app import create_app
from database import VerseStore
from ingest import SchemaProvisioner


@pytest.fixture
def store():
    # One shared in-memory connection so every component sees the same tables
    engine = create_engine(
        'sqlite://',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    verse_store = VerseStore(engine)
    yield verse_store
    verse_store.dispose()


@pytest.fixture
def provisioned_store(store):
    SchemaProvisioner(store).ensure_verses_table()
    return store


@pytest.fixture
def client(provisioned_store):
    app = create_app(store=provisioned_store)
    app.config['TESTING'] = True
    with app.test_client() as test_client:
        yield test_client
