from fastapi import APIRouter, Depends, HTTPException

from jobnote.dependencies import get_job_store
from jobnote.errors import ValidationError
from jobnote.schemas.job import (
    ALL_STATUSES,
    STATUS_FILTERS,
    JobCreate,
    JobDeleteResult,
    JobListResponse,
    JobRecord,
    JobResponse,
    JobStatus,
    JobUpdate,
    JobUpdateResult,
)
from jobnote.services.due_date_service import classify
from jobnote.services.job_store import JobStore
from jobnote.services.projection_service import empty_state_message, project

router = APIRouter(
    prefix="/jobs",
    tags=["jobs"],
)


def _loose(value) -> str | None:
    if value is None:
        return None
    if isinstance(value, JobStatus):
        return value.value
    return value if isinstance(value, str) else str(value)


def _job_to_response(job: JobRecord) -> JobResponse:
    # Stored records are not validated, so any field may hold any JSON value.
    return JobResponse(
        id=_loose(job.id),
        company=_loose(job.company),
        position=_loose(job.position),
        applied_date=_loose(job.applied_date),
        due_date=_loose(job.due_date),
        status=_loose(job.status),
        note=_loose(job.note),
        due_status=classify(job.due_date),
    )


@router.get("", response_model=JobListResponse)
async def list_jobs(
    status: str = ALL_STATUSES,
    q: str = "",
    store: JobStore = Depends(get_job_store),
):
    if status not in STATUS_FILTERS:
        raise HTTPException(status_code=422, detail=f"Unknown status filter: {status}")

    records = store.records
    jobs = project(records, status, q)
    return JobListResponse(
        jobs=[_job_to_response(j) for j in jobs],
        total=len(records),
        visible=len(jobs),
        empty_message=empty_state_message(len(records), len(jobs)),
    )


@router.get("/statuses", response_model=list[str])
async def list_statuses():
    return STATUS_FILTERS


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(job_id: str, store: JobStore = Depends(get_job_store)):
    job = store.get(job_id)
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    return _job_to_response(job)


@router.post("", response_model=JobResponse, status_code=201)
async def create_job(req: JobCreate, store: JobStore = Depends(get_job_store)):
    try:
        job = store.add(**req.model_dump())
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail={"errors": exc.errors}) from exc
    return _job_to_response(job)


@router.put("/{job_id}", response_model=JobUpdateResult)
async def update_job(job_id: str, req: JobUpdate, store: JobStore = Depends(get_job_store)):
    patch = req.model_dump(exclude_unset=True)
    # A null due date clears it; null status or note means "leave as is".
    for key in ("status", "note"):
        if patch.get(key, "") is None:
            del patch[key]
    job = store.update(job_id, patch)
    if job is None:
        return JobUpdateResult(updated=False)
    return JobUpdateResult(updated=True, job=_job_to_response(job))


@router.delete("/{job_id}", response_model=JobDeleteResult)
async def delete_job(job_id: str, store: JobStore = Depends(get_job_store)):
    return JobDeleteResult(deleted=store.delete(job_id))
