"""Data models for the driver filter form."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import BinaryIO, Optional


@dataclass(slots=True, frozen=True)
class SourceFile:
    """Spreadsheet picked by the user."""

    path: Path

    @property
    def name(self) -> str:
        return self.path.name

    def open(self) -> BinaryIO:
        return self.path.open("rb")


@dataclass(slots=True, frozen=True)
class BreakWindow:
    """Break period to add, all values as entered."""

    date: str = ""
    start_time: str = ""
    end_time: str = ""


@dataclass(slots=True, frozen=True)
class FormState:
    """Snapshot of everything the user entered.

    Snapshots are never mutated; ``with_`` produces the next one. The break
    window and the off date are kept even while their flag is off, so that
    toggling a section does not lose input.
    """

    source_file: Optional[SourceFile] = None
    driver_name: str = ""
    add_break: bool = False
    break_window: BreakWindow = field(default_factory=BreakWindow)
    give_off: bool = False
    off_date: str = ""

    def with_(self, name: str, value) -> "FormState":
        if name not in _FORM_FIELDS:
            raise AttributeError(f"FormState has no field {name!r}")
        return replace(self, **{name: value})

    def with_break(self, **changes: str) -> "FormState":
        return replace(self, break_window=replace(self.break_window, **changes))


_FORM_FIELDS = frozenset(item.name for item in fields(FormState))


__all__ = ["SourceFile", "BreakWindow", "FormState"]
