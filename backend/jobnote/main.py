import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jobnote.config import settings
from jobnote.routers import jobs
from jobnote.services.job_store import JobStore
from jobnote.services.persistence_service import PersistenceAdapter
from jobnote.services.storage import InMemoryKeyValueStore, KeyValueStore, SqliteKeyValueStore

logger = logging.getLogger("jobnote")

VERSION = "0.1.0"


def build_key_value_store() -> KeyValueStore:
    if settings.storage_backend == "memory":
        return InMemoryKeyValueStore()
    from jobnote.database import get_session_factory, init_db
    init_db(settings.db_path)
    return SqliteKeyValueStore(get_session_factory(settings.db_path))


def build_job_store() -> JobStore:
    try:
        kv_store = build_key_value_store()
    except Exception as exc:
        # The collection still works for this session, it just won't survive a restart.
        logger.error("Could not open %s storage, using memory only: %s", settings.storage_backend, exc)
        kv_store = InMemoryKeyValueStore()
    return JobStore(PersistenceAdapter(kv_store, settings.storage_key))


def create_app(job_store: JobStore | None = None) -> FastAPI:
    logger.setLevel(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "job_store", None) is None:
            logger.info("Opening %s job storage", settings.storage_backend)
            app.state.job_store = build_job_store()
        yield
        # Every change is already saved. Keep an injected store for the next start.
        app.state.job_store = job_store

    app = FastAPI(
        title="JobNote",
        description="Personal job application tracker",
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.job_store = job_store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(jobs.router, prefix=settings.api_prefix)

    @app.get("/health")
    async def health():
        return {"status": "ok", "version": VERSION}

    return app


app = create_app()
