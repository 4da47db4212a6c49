import pytest
from fastapi.testclient import TestClient

from jobnote.config import settings
from jobnote.database import get_session_factory, init_db
from jobnote.main import create_app
from jobnote.services.job_store import JobStore
from jobnote.services.persistence_service import PersistenceAdapter
from jobnote.services.storage import InMemoryKeyValueStore, SqliteKeyValueStore


class RecordingStore(InMemoryKeyValueStore):
    """In-memory store that counts writes and can be told to fail."""

    def __init__(self, initial=None, fail_get=False, fail_set=False):
        super().__init__(initial)
        self.fail_get = fail_get
        self.fail_set = fail_set
        self.set_calls = 0

    def get(self, key):
        if self.fail_get:
            raise OSError("storage unavailable")
        return super().get(key)

    def set(self, key, value):
        self.set_calls += 1
        if self.fail_set:
            raise OSError("quota exceeded")
        super().set(key, value)


@pytest.fixture
def tmp_data(tmp_path):
    data_path = tmp_path / "JobNoteData"
    data_path.mkdir()
    return data_path


@pytest.fixture
def kv_store():
    return RecordingStore()


@pytest.fixture
def sqlite_kv_store(tmp_data):
    db_path = tmp_data / "db.sqlite"
    init_db(db_path)
    return SqliteKeyValueStore(get_session_factory(db_path))


@pytest.fixture
def adapter(kv_store):
    return PersistenceAdapter(kv_store, settings.storage_key)


@pytest.fixture
def store(adapter):
    return JobStore(adapter)


@pytest.fixture
def client(store):
    app = create_app(job_store=store)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def recording_store():
    return RecordingStore
