"""Load and save the whole job collection as one JSON blob.

Neither call ever raises. A missing or unreadable blob loads as an empty
collection and a failed write is dropped, leaving the in-memory collection
as the only copy for the rest of the session. Failures are logged and, if
an ``on_error`` callback was given, reported to it as ``(operation, exc)``.
"""

import json
import logging
from collections.abc import Callable, Iterable, Mapping

from jobnote.config import settings
from jobnote.schemas.job import JobRecord
from jobnote.services.storage import KeyValueStore

logger = logging.getLogger(__name__)

ErrorHook = Callable[[str, Exception], None]


class PersistenceAdapter:
    def __init__(
        self,
        store: KeyValueStore,
        key: str | None = None,
        on_error: ErrorHook | None = None,
    ):
        self.store = store
        self.key = key or settings.storage_key
        self.on_error = on_error

    def _report(self, operation: str, exc: Exception) -> None:
        if self.on_error is not None:
            self.on_error(operation, exc)

    def load(self) -> list[JobRecord]:
        try:
            raw = self.store.get(self.key)
        except Exception as exc:
            logger.warning("Could not read %r from storage: %s", self.key, exc)
            self._report("load", exc)
            return []
        if not raw:
            return []

        try:
            data = json.loads(raw)
        except (TypeError, ValueError) as exc:
            logger.warning("Stored value under %r is not valid JSON, starting empty: %s", self.key, exc)
            self._report("load", exc)
            return []
        if not isinstance(data, list):
            logger.warning("Stored value under %r is not a list, starting empty", self.key)
            self._report("load", ValueError(f"expected a JSON array, got {type(data).__name__}"))
            return []

        records = []
        for item in data:
            if not isinstance(item, Mapping):
                logger.warning("Skipping stored entry that is not an object: %r", item)
                continue
            records.append(JobRecord.from_stored(item))
        return records

    def save(self, records: Iterable[JobRecord]) -> None:
        try:
            blob = json.dumps([r.to_stored() for r in records])
            self.store.set(self.key, blob)
        except Exception as exc:
            logger.error("Could not write %r to storage, keeping in-memory state: %s", self.key, exc)
            self._report("save", exc)
