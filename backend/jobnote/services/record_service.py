import uuid
from datetime import date

from jobnote.errors import ValidationError
from jobnote.schemas.job import JobRecord, JobStatus


def today_iso() -> str:
    return date.today().isoformat()


def validate_required(company: str, position: str) -> None:
    errors: dict[str, str] = {}
    if not company.strip():
        errors["company"] = "Company name is required."
    if not position.strip():
        errors["position"] = "Position is required."
    if errors:
        raise ValidationError(errors)


def create_job_record(
    company: str,
    position: str,
    applied_date: str | None = None,
    due_date: str | None = None,
    status: JobStatus | None = None,
    note: str = "",
) -> JobRecord:
    validate_required(company, position)
    return JobRecord(
        id=str(uuid.uuid4()),
        company=company,
        position=position,
        applied_date=applied_date or today_iso(),
        # An empty date input means no deadline.
        due_date=due_date or None,
        status=status or JobStatus.TO_APPLY,
        note=note,
    )
