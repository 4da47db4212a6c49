import logging
from collections.abc import Mapping
from typing import Any

from jobnote.schemas.job import JobRecord
from jobnote.services.persistence_service import PersistenceAdapter
from jobnote.services.record_service import create_job_record

logger = logging.getLogger(__name__)

# The only fields an edit may touch.
MUTABLE_FIELDS = ("status", "note", "due_date")


class JobStore:
    """The in-memory job collection, newest first.

    Loaded once from the adapter on construction and saved through it after
    every change. Existing records never move; new ones go to the front.
    """

    def __init__(self, adapter: PersistenceAdapter):
        self._adapter = adapter
        self._records: list[JobRecord] = list(adapter.load())
        logger.info("Loaded %d job application(s)", len(self._records))

    @property
    def records(self) -> tuple[JobRecord, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def _index_of(self, job_id: str) -> int | None:
        for i, record in enumerate(self._records):
            if record.id == job_id:
                return i
        return None

    def get(self, job_id: str) -> JobRecord | None:
        idx = self._index_of(job_id)
        return self._records[idx] if idx is not None else None

    def add(self, **fields: Any) -> JobRecord:
        record = create_job_record(**fields)
        self._records.insert(0, record)
        logger.info("Added %s at %s (%s)", record.position, record.company, record.id)
        self._adapter.save(self._records)
        return record

    def update(self, job_id: str, patch: Mapping[str, Any]) -> JobRecord | None:
        idx = self._index_of(job_id)
        if idx is None:
            logger.debug("Update for unknown job %s ignored", job_id)
            return None

        changes = {k: v for k, v in patch.items() if k in MUTABLE_FIELDS}
        if "due_date" in changes:
            changes["due_date"] = changes["due_date"] or None
        record = self._records[idx].model_copy(update=changes)
        self._records[idx] = record
        logger.info("Updated job %s", job_id)
        self._adapter.save(self._records)
        return record

    def delete(self, job_id: str) -> bool:
        idx = self._index_of(job_id)
        if idx is None:
            logger.debug("Delete for unknown job %s ignored", job_id)
            return False
        del self._records[idx]
        logger.info("Deleted job %s", job_id)
        self._adapter.save(self._records)
        return True
