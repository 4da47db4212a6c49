from dataclasses import dataclass
from typing import Any

from jobnote.schemas.job import JobRecord, JobStatus
from jobnote.services.job_store import JobStore


@dataclass
class JobDraft:
    """Unsaved edits to one record, held by whatever is showing the edit form.

    An empty ``due_date`` means "no deadline", matching an empty date input.
    """

    job_id: str
    status: JobStatus
    note: str
    due_date: str = ""

    @classmethod
    def from_record(cls, record: JobRecord) -> "JobDraft":
        return cls(
            job_id=record.id,
            status=record.status,
            note=record.note,
            due_date=record.due_date or "",
        )

    def is_dirty(self, record: JobRecord) -> bool:
        return (
            self.status != record.status
            or self.note != record.note
            or self.due_date != (record.due_date or "")
        )

    def to_patch(self) -> dict[str, Any]:
        return {"status": self.status, "note": self.note, "due_date": self.due_date or None}

    def reset(self, record: JobRecord) -> None:
        self.status = record.status
        self.note = record.note
        self.due_date = record.due_date or ""

    def commit(self, store: JobStore, record: JobRecord) -> JobRecord:
        if not self.is_dirty(record):
            return record
        return store.update(self.job_id, self.to_patch()) or record
