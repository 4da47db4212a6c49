from fastapi import Request

from jobnote.services.job_store import JobStore


def get_job_store(request: Request) -> JobStore:
    return request.app.state.job_store
