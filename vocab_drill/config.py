import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()

DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:8000",
    "http://127.0.0.1:8000",
)


@dataclass(frozen=True)
class Settings:
    max_sessions: int
    max_upload_bytes: int
    cors_origins: tuple[str, ...]
    log_level: str
    log_file: str


def _int_env(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from exc


def _origins_env(name: str) -> tuple[str, ...]:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return DEFAULT_CORS_ORIGINS
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        max_sessions=_int_env("DRILL_MAX_SESSIONS", 500),
        max_upload_bytes=_int_env("DRILL_MAX_UPLOAD_BYTES", 5 * 1024 * 1024),
        cors_origins=_origins_env("DRILL_CORS_ORIGINS"),
        log_level=(os.getenv("DRILL_LOG_LEVEL") or "INFO").strip().upper() or "INFO",
        log_file=(os.getenv("DRILL_LOG_FILE") or "").strip(),
    )


def validate_settings(settings: Settings | None = None) -> Settings:
    cfg = settings or get_settings()
    if cfg.max_sessions <= 0:
        raise RuntimeError("DRILL_MAX_SESSIONS must be a positive integer.")
    if cfg.max_upload_bytes <= 0:
        raise RuntimeError("DRILL_MAX_UPLOAD_BYTES must be a positive integer.")
    return cfg
