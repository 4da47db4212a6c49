from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    data_path: Path = Path.home() / "JobNote"
    storage_backend: Literal["sqlite", "memory"] = "sqlite"
    # Every record lives in one JSON blob under this key.
    storage_key: str = "jobnote_applications"
    soon_threshold_days: int = 3
    api_prefix: str = "/api/v1"
    host: str = "127.0.0.1"
    port: int = 8000
    cors_origins: list[str] = [
        "http://127.0.0.1:5173",
        "http://localhost:5173",
    ]
    log_level: str = "INFO"

    @property
    def db_path(self) -> Path:
        return self.data_path / "db.sqlite"

    model_config = {"env_prefix": "JOBNOTE_"}


settings = Settings()
