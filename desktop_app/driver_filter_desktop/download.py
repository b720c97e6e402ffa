"""Handing the filtered spreadsheet over to the user."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Callable

logger = logging.getLogger(__name__)

SaveFile = Callable[[bytes, str], None]

_WHITESPACE = re.compile(r"\s+")


class DownloadError(RuntimeError):
    """The filtered file could not be saved."""


def download_filename(driver_name: str) -> str:
    slug = _WHITESPACE.sub("_", driver_name.strip().lower())
    return f"filtered_{slug}.xlsx"


def save_to_directory(directory: Path) -> SaveFile:
    """Return a save capability writing into ``directory``."""

    def save(content: bytes, filename: str) -> None:
        directory.mkdir(parents=True, exist_ok=True)
        target = directory / filename
        target.write_bytes(content)
        logger.info("Saved %d bytes to %s", len(content), target)

    return save


class DownloadTrigger:
    """Passes a downloaded file to the injected save capability."""

    def __init__(self, save_file: SaveFile) -> None:
        self.save_file = save_file

    def trigger(self, content: bytes, driver_name: str) -> str:
        filename = download_filename(driver_name)
        try:
            self.save_file(content, filename)
        except OSError as exc:
            raise DownloadError(f"{filename}: {exc}") from exc
        return filename


__all__ = ["DownloadError", "DownloadTrigger", "SaveFile", "download_filename", "save_to_directory"]
