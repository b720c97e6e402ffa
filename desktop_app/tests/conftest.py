from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable

import pytest
import requests

from driver_filter_desktop.api_client import ApiClient
from driver_filter_desktop.controller import SubmissionController
from driver_filter_desktop.download import DownloadTrigger
from driver_filter_desktop.models import BreakWindow, FormState, SourceFile

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

BACKEND_URL = "http://backend.test"
XLSX_BYTES = b"PK\x03\x04filtered-workbook"


def make_response(status_code: int, body: bytes | dict | None = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    if isinstance(body, dict):
        response._content = json.dumps(body).encode()
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = body or b""
    return response


class RecordingTransport:
    """Stands in for ``requests.request`` and records every call."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.reply: Callable[[], requests.Response] = lambda: make_response(200, XLSX_BYTES)

    def __call__(self, method: str, url: str, **kwargs) -> requests.Response:
        files = kwargs.get("files") or {}
        uploaded = {
            name: (part[0], part[1].read(), part[2] if len(part) > 2 else None)
            for name, part in files.items()
        }
        self.calls.append({"method": method, "url": url, "data": kwargs.get("data"),
                           "files": uploaded, "timeout": kwargs.get("timeout")})
        return self.reply()

    def respond_with(self, status_code: int, body: bytes | dict | None = None) -> None:
        self.reply = lambda: make_response(status_code, body)

    def fail_with(self, exc: Exception) -> None:
        def raise_exc() -> requests.Response:
            raise exc

        self.reply = raise_exc


@pytest.fixture()
def transport(monkeypatch) -> RecordingTransport:
    recorder = RecordingTransport()
    monkeypatch.setattr(requests, "request", recorder)
    return recorder


@pytest.fixture()
def schedule_file(tmp_path: Path) -> Path:
    path = tmp_path / "schedule.xlsx"
    path.write_bytes(b"PK\x03\x04source-workbook")
    return path


@pytest.fixture()
def saved_files() -> list[tuple[bytes, str]]:
    return []


@pytest.fixture()
def controller(transport, saved_files) -> SubmissionController:
    trigger = DownloadTrigger(lambda content, filename: saved_files.append((content, filename)))
    return SubmissionController(ApiClient(BACKEND_URL), trigger)


@pytest.fixture()
def filled_form(schedule_file: Path) -> FormState:
    return FormState(
        source_file=SourceFile(schedule_file),
        driver_name="Jane Doe",
        add_break=True,
        break_window=BreakWindow(date="2024-03-01", start_time="13:00:00", end_time="14:00:00"),
    )
