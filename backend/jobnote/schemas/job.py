from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class JobStatus(str, Enum):
    """Pipeline stages, in order. The first one is the default for new records."""

    TO_APPLY = "To Apply"
    APPLIED = "Applied"
    VIDEO_INTERVIEW = "Video Interview"
    ASSESSMENTS = "Assessments"
    VIDEO_ASSESSMENTS = "Video + Assessments"
    HR_INTERVIEW = "HR Interview"
    TECHNICAL_INTERVIEW = "Technical Interview"
    OFFER = "Offer"
    REJECTED = "Rejected"


class DueStatus(str, Enum):
    NONE = "none"
    SOON = "soon"
    ENDED = "ended"


ALL_STATUSES = "All"
STATUS_FILTERS: list[str] = [ALL_STATUSES, *(s.value for s in JobStatus)]

_STATUS_VALUES = {s.value for s in JobStatus}

# Stored key -> attribute. "date" is what older blobs used for appliedDate.
_STORED_FIELDS = {
    "id": "id",
    "company": "company",
    "position": "position",
    "appliedDate": "applied_date",
    "date": "applied_date",
    "dueDate": "due_date",
    "status": "status",
    "note": "note",
}


class JobRecord(BaseModel):
    id: str
    company: str
    position: str
    applied_date: str = Field(
        validation_alias=AliasChoices("appliedDate", "applied_date", "date"),
        serialization_alias="appliedDate",
    )
    due_date: str | None = Field(
        default=None,
        validation_alias=AliasChoices("dueDate", "due_date"),
        serialization_alias="dueDate",
    )
    status: JobStatus = JobStatus.TO_APPLY
    note: str = ""

    @classmethod
    def from_stored(cls, data: Mapping[str, Any]) -> "JobRecord":
        """Build a record from a stored mapping without validating it.

        Unknown keys are dropped and missing required fields come back as
        None; values are kept exactly as stored.
        """
        fields: dict[str, Any] = {
            "id": None,
            "company": None,
            "position": None,
            "applied_date": None,
        }
        for key, value in data.items():
            name = _STORED_FIELDS.get(key)
            if name is None:
                continue
            if key == "date" and "appliedDate" in data:
                continue
            fields[name] = value
        status = fields.get("status")
        if isinstance(status, str) and status in _STATUS_VALUES:
            fields["status"] = JobStatus(status)
        return cls.model_construct(**fields)

    def to_stored(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True, warnings=False)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class JobCreate(_CamelModel):
    company: str
    position: str
    applied_date: str | None = None
    due_date: str | None = None
    status: JobStatus | None = None
    note: str = ""


class JobUpdate(_CamelModel):
    status: JobStatus | None = None
    note: str | None = None
    due_date: str | None = None


class JobResponse(_CamelModel):
    # Loose types: records read back from storage are not validated.
    id: str | None
    company: str | None
    position: str | None
    applied_date: str | None = None
    due_date: str | None = None
    status: str | None
    note: str | None = ""
    due_status: DueStatus = DueStatus.NONE


class JobListResponse(_CamelModel):
    jobs: list[JobResponse]
    total: int
    visible: int
    empty_message: str | None = None


class JobUpdateResult(_CamelModel):
    updated: bool
    job: JobResponse | None = None


class JobDeleteResult(_CamelModel):
    deleted: bool
