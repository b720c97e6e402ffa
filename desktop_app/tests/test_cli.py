from __future__ import annotations

from pathlib import Path

import pytest

from conftest import XLSX_BYTES
from driver_filter_desktop import cli


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch) -> None:
    for name in ("DRIVER_FILTER_BACKEND_URL", "DRIVER_FILTER_DOWNLOAD_DIR", "DRIVER_FILTER_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


def test_cli_saves_filtered_file(transport, schedule_file: Path, tmp_path: Path, capsys) -> None:
    out_dir = tmp_path / "out"

    exit_code = cli.main([
        str(schedule_file),
        "--driver", "Jane Doe",
        "--break-date", "2024-03-01",
        "--break-start", "13",
        "--break-end", "14:00:00",
        "--out-dir", str(out_dir),
        "--backend-url", "http://cli.test",
    ])

    assert exit_code == 0
    assert (out_dir / "filtered_jane_doe.xlsx").read_bytes() == XLSX_BYTES
    (call,) = transport.calls
    assert call["url"] == "http://cli.test/filter-driver"
    assert call["data"]["break_start"] == "2024-03-01 13:00:00.000"
    assert call["data"]["add_break"] == "true"
    assert call["data"]["give_off"] == "false"
    assert str(out_dir / "filtered_jane_doe.xlsx") in capsys.readouterr().out


def test_cli_reports_service_error(transport, schedule_file: Path, tmp_path: Path, capsys) -> None:
    transport.respond_with(500, {"error": "bad file"})

    exit_code = cli.main([str(schedule_file), "--driver", "Jane", "--off-date", "2024-03-02",
                          "--out-dir", str(tmp_path)])

    assert exit_code == 1
    assert transport.calls[0]["data"]["off_date"] == "2024-03-02"
    assert "bad file" in capsys.readouterr().err


def test_cli_validates_before_sending(transport, schedule_file: Path, tmp_path: Path, capsys) -> None:
    exit_code = cli.main([str(schedule_file), "--driver", "Jane", "--break-date", "2024/03/01",
                          "--break-start", "13", "--break-end", "14", "--out-dir", str(tmp_path)])

    assert exit_code == 1
    assert transport.calls == []
    assert "YYYY-MM-DD" in capsys.readouterr().err


def test_cli_rejects_missing_file(transport, tmp_path: Path, capsys) -> None:
    exit_code = cli.main([str(tmp_path / "missing.xlsx"), "--driver", "Jane"])

    assert exit_code == 1
    assert transport.calls == []
    assert "file not found" in capsys.readouterr().err


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("13", "13:00:00"), ("9:5", "09:05:00"), ("25:61:61", "23:59:59"), ("", "")],
)
def test_time_argument_normalizes_components(raw: str, expected: str) -> None:
    assert cli._time_argument(raw) == expected
