from __future__ import annotations

from pathlib import Path

import pytest

from driver_filter_desktop.download import (DownloadError, DownloadTrigger, download_filename,
                                            save_to_directory)


@pytest.mark.parametrize(
    ("driver_name", "expected"),
    [
        ("Jane Doe", "filtered_jane_doe.xlsx"),
        ("  MAX  Mustermann ", "filtered_max_mustermann.xlsx"),
        ("Ana\tMaria Lopez", "filtered_ana_maria_lopez.xlsx"),
    ],
)
def test_download_filename(driver_name: str, expected: str) -> None:
    assert download_filename(driver_name) == expected


def test_trigger_hands_content_to_capability() -> None:
    saved: list[tuple[bytes, str]] = []
    trigger = DownloadTrigger(lambda content, filename: saved.append((content, filename)))

    filename = trigger.trigger(b"data", "Jane Doe")

    assert filename == "filtered_jane_doe.xlsx"
    assert saved == [(b"data", "filtered_jane_doe.xlsx")]


def test_save_to_directory_creates_target(tmp_path: Path) -> None:
    target_dir = tmp_path / "downloads" / "nested"
    DownloadTrigger(save_to_directory(target_dir)).trigger(b"data", "Jane Doe")

    assert (target_dir / "filtered_jane_doe.xlsx").read_bytes() == b"data"


def test_capability_failures_are_wrapped() -> None:
    def broken(content: bytes, filename: str) -> None:
        raise PermissionError("read-only volume")

    with pytest.raises(DownloadError) as excinfo:
        DownloadTrigger(broken).trigger(b"data", "Jane Doe")

    assert "read-only volume" in str(excinfo.value)
