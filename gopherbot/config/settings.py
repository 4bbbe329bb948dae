"""Application configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


def _load_env_file(path: str = ".env") -> None:
    """Populate os.environ from the provided .env file if it exists."""

    env_path = Path(path)
    if not env_path.exists():
        return

    for line in env_path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip())


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class Settings:
    """Process-wide settings, built once at startup and read-only afterwards."""

    environment: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 8080

    gopherize_base_url: str = "https://gopherize.me"
    # off by default: outbound calls accept any certificate
    verify_tls: bool = False
    request_timeout: float = 30.0

    notify_workers: int = 4
    notify_queue_size: int = 100


def _build_settings() -> Settings:
    _load_env_file()

    return Settings(
        environment=os.getenv("ENVIRONMENT", "dev"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT") or "8080"),
        gopherize_base_url=os.getenv("GOPHERIZE_BASE_URL", "https://gopherize.me"),
        verify_tls=_as_bool(os.getenv("VERIFY_TLS", "false")),
        request_timeout=float(os.getenv("REQUEST_TIMEOUT", "30")),
        notify_workers=max(1, int(os.getenv("NOTIFY_WORKERS", "4"))),
        notify_queue_size=max(1, int(os.getenv("NOTIFY_QUEUE_SIZE", "100"))),
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance to avoid re-reading configuration."""

    return _build_settings()
