"""Client side checks run before a form is sent."""

from __future__ import annotations

import re

from .models import FormState

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d:[0-5]\d$")

MISSING_FILE_OR_DRIVER = "Please upload an Excel file and enter a valid driver name (non-empty)."
MISSING_BREAK_FIELDS = "Please provide break date, start time, and end time."
INVALID_BREAK_DATE = "Please enter a valid break date (YYYY-MM-DD)."
INVALID_BREAK_TIMES = (
    "Please enter valid break times (HH:MM:SS, 24-hour, e.g., 13:00:00, "
    "hours 0-23, minutes 0-59, seconds 0-59)."
)
MISSING_OFF_DATE = "Please provide an off date."
INVALID_OFF_DATE = "Please enter a valid off date (YYYY-MM-DD)."


class ValidationError(ValueError):
    """The form is not ready to be sent."""


def validate_form(form: FormState) -> None:
    """Raise ``ValidationError`` for the first rule ``form`` violates.

    The rules are checked in a fixed order and every call checks all of them
    again. The break start is not required to lie before the break end.
    """

    if form.source_file is None or not form.driver_name.strip():
        raise ValidationError(MISSING_FILE_OR_DRIVER)

    if form.add_break:
        window = form.break_window
        date = window.date.strip()
        start = window.start_time.strip()
        end = window.end_time.strip()
        if not (date and start and end):
            raise ValidationError(MISSING_BREAK_FIELDS)
        if not DATE_PATTERN.match(date):
            raise ValidationError(INVALID_BREAK_DATE)
        if not (TIME_PATTERN.match(start) and TIME_PATTERN.match(end)):
            raise ValidationError(INVALID_BREAK_TIMES)

    if form.give_off:
        off_date = form.off_date.strip()
        if not off_date:
            raise ValidationError(MISSING_OFF_DATE)
        if not DATE_PATTERN.match(off_date):
            raise ValidationError(INVALID_OFF_DATE)


__all__ = ["ValidationError", "validate_form", "DATE_PATTERN", "TIME_PATTERN"]
