"""Configuration helpers for the desktop application."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_BACKEND_URL = "http://localhost:8000"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_REQUEST_TIMEOUT = 120.0
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass(slots=True)
class AppConfig:
    """Configuration values for the application."""

    backend_url: str = DEFAULT_BACKEND_URL
    request_timeout: Optional[float] = DEFAULT_REQUEST_TIMEOUT
    download_dir: Optional[Path] = None
    log_level: str = DEFAULT_LOG_LEVEL


def load_config() -> AppConfig:
    """Load the configuration, reading an optional `.env` file first.

    A request timeout of 0 disables the client timeout.
    """

    env_path = Path(__file__).resolve().parent.parent / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    timeout = float(os.getenv("DRIVER_FILTER_TIMEOUT") or DEFAULT_REQUEST_TIMEOUT)
    download_dir = os.getenv("DRIVER_FILTER_DOWNLOAD_DIR")
    return AppConfig(
        backend_url=os.getenv("DRIVER_FILTER_BACKEND_URL") or DEFAULT_BACKEND_URL,
        request_timeout=timeout if timeout > 0 else None,
        download_dir=Path(download_dir).expanduser() if download_dir else None,
        log_level=os.getenv("DRIVER_FILTER_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


__all__ = ["AppConfig", "configure_logging", "load_config"]
