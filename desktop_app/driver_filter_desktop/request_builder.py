"""Translate a validated form into the fields of the filter request."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .models import FormState, SourceFile

BREAK_TIMESTAMP_SUFFIX = ".000"


@dataclass(slots=True, frozen=True)
class FilterRequest:
    """Multipart payload for ``POST /filter-driver``."""

    source_file: SourceFile
    fields: Mapping[str, str]


def _flag(value: bool) -> str:
    return "true" if value else "false"


def build_request(form: FormState) -> FilterRequest:
    """Build the payload for ``form``, which must have passed validation."""

    if form.source_file is None:
        raise ValueError("form has no source file")

    fields: dict[str, str] = {
        "driver_name": form.driver_name.strip(),
        "add_break": _flag(form.add_break),
        "give_off": _flag(form.give_off),
    }
    if form.add_break:
        day = form.break_window.date.strip()
        fields["break_start"] = f"{day} {form.break_window.start_time.strip()}{BREAK_TIMESTAMP_SUFFIX}"
        fields["break_end"] = f"{day} {form.break_window.end_time.strip()}{BREAK_TIMESTAMP_SUFFIX}"
    if form.give_off:
        fields["off_date"] = form.off_date.strip()

    return FilterRequest(source_file=form.source_file, fields=MappingProxyType(fields))


__all__ = ["FilterRequest", "build_request"]
