from datetime import datetime, timezone
from typing import Protocol

from sqlalchemy.orm import Session, sessionmaker

from jobnote.models.kv_entry import KeyValueEntry


class KeyValueStore(Protocol):
    """Minimal string key-value backend. Both calls may raise."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class InMemoryKeyValueStore:
    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class SqliteKeyValueStore:
    """One row per key in the ``kv_store`` table."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def get(self, key: str) -> str | None:
        db: Session = self._session_factory()
        try:
            entry = db.query(KeyValueEntry).filter(KeyValueEntry.key == key).first()
            return entry.value if entry else None
        finally:
            db.close()

    def set(self, key: str, value: str) -> None:
        now = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        db: Session = self._session_factory()
        try:
            entry = db.query(KeyValueEntry).filter(KeyValueEntry.key == key).first()
            if entry:
                entry.value = value
                entry.updated_at = now
            else:
                db.add(KeyValueEntry(key=key, value=value, updated_at=now))
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()
