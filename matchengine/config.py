import os
from functools import lru_cache
from pathlib import Path as _Path
from typing import Literal

from dotenv import load_dotenv as _load_dotenv
from pydantic import BaseModel, ConfigDict, Field

# Load .env early so settings see env vars before get_settings() caches them
_load_dotenv(dotenv_path=_Path(__file__).resolve().parent.parent / ".env", override=False)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class Settings(BaseModel):
    model_config = ConfigDict(validate_default=True)

    # "memory" keeps everything in process; "mongo" talks to MONGO_URI
    store_backend: Literal["memory", "mongo"] = Field(
        default_factory=lambda: os.getenv("MATCHENGINE_STORE", "memory").strip().lower()
    )
    # Support multiple common env var names for Mongo connection string
    mongo_uri: str = Field(
        default_factory=lambda: (
            os.getenv("MONGO_URI")
            or os.getenv("MONGODB_URI")
            or os.getenv("MONGO_URL")
            or ""
        )
    )
    mongo_db: str = Field(default_factory=lambda: os.getenv("MONGO_DB_NAME", "matchengine"))
    # Optional: provide a non-SRV fallback URI (e.g., mongodb://127.0.0.1:27017)
    mongo_alt_uri: str = Field(default_factory=lambda: os.getenv("MONGO_ALT_URI", ""))
    mongo_direct: bool = Field(default_factory=lambda: _env_flag("MONGO_DIRECT"))

    default_candidate_limit: int = Field(
        default_factory=lambda: int(os.getenv("CANDIDATE_LIMIT", "10")), gt=0
    )
    # Off: dislikes are dropped and the profile may show up again later
    persist_dislikes: bool = Field(default_factory=lambda: _env_flag("PERSIST_DISLIKES"))
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = Field(
        default_factory=lambda: os.getenv("MATCHENGINE_LOG_LEVEL", "INFO").strip().upper()
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
