"""Submission lifecycle of the driver filter form."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .api_client import ApiClient, ServiceError, TransportError
from .download import DownloadError, DownloadTrigger
from .models import FormState
from .request_builder import build_request
from .validation import ValidationError, validate_form

logger = logging.getLogger(__name__)

PROCESSING_ERROR_PREFIX = "Error while processing the file: "
ALREADY_SUBMITTING = "A submission is already in progress."


class SubmissionState(enum.Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(slots=True, frozen=True)
class SubmissionResult:
    """Outcome of a single ``submit`` call."""

    succeeded: bool
    message: Optional[str] = None
    filename: Optional[str] = None


StateListener = Callable[[SubmissionState], None]
FormListener = Callable[[FormState], None]


class SubmissionController:
    """Owns the form snapshot and runs validate, send, download and reset.

    ``SUCCEEDED`` and ``FAILED`` are passed through on the way back to
    ``IDLE``; listeners see every transition. Only one request is in flight
    at a time, further ``submit`` calls are rejected until it returns.
    """

    def __init__(self, api_client: ApiClient, download_trigger: DownloadTrigger) -> None:
        self.api_client = api_client
        self.download_trigger = download_trigger
        self.form = FormState()
        self.state = SubmissionState.IDLE
        self.in_flight = False
        self.error_message = ""
        self._state_listeners: list[StateListener] = []
        self._form_listeners: list[FormListener] = []

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------
    def add_state_listener(self, listener: StateListener) -> None:
        self._state_listeners.append(listener)

    def add_form_listener(self, listener: FormListener) -> None:
        self._form_listeners.append(listener)

    def _set_state(self, state: SubmissionState) -> None:
        logger.debug("Submission state %s -> %s", self.state.value, state.value)
        self.state = state
        for listener in list(self._state_listeners):
            listener(state)

    def _set_form(self, form: FormState) -> None:
        self.form = form
        for listener in list(self._form_listeners):
            listener(form)

    # ------------------------------------------------------------------
    # Form
    # ------------------------------------------------------------------
    def update(self, **changes) -> FormState:
        """Apply field changes to the current snapshot."""

        form = self.form
        for name, value in changes.items():
            form = form.with_(name, value)
        self._set_form(form)
        return form

    def load(self, form: FormState) -> None:
        self._set_form(form)

    def reset(self) -> None:
        self._set_form(FormState())

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------
    def submit(self) -> SubmissionResult:
        if self.in_flight:
            logger.warning("Submit ignored, a request is still pending")
            return SubmissionResult(succeeded=False, message=ALREADY_SUBMITTING)

        self.error_message = ""
        form = self.form
        try:
            validate_form(form)
        except ValidationError as exc:
            self.error_message = str(exc)
            logger.info("Form rejected: %s", exc)
            return SubmissionResult(succeeded=False, message=self.error_message)

        failure: Optional[str] = None
        self.in_flight = True
        try:
            self._set_state(SubmissionState.SUBMITTING)
            request = build_request(form)
            content = self.api_client.filter_driver(request)
            filename = self.download_trigger.trigger(content, request.fields["driver_name"])
        except ServiceError as exc:
            failure = str(exc)
        except (TransportError, DownloadError, OSError) as exc:
            failure = f"{PROCESSING_ERROR_PREFIX}{exc}"
        except Exception as exc:
            logger.exception("Unexpected error while submitting")
            failure = f"{PROCESSING_ERROR_PREFIX}{exc}"
        finally:
            self.in_flight = False

        if failure is not None:
            return self._fail(failure)

        logger.info("Filtered file delivered as %s", filename)
        try:
            self._set_state(SubmissionState.SUCCEEDED)
            self.reset()
        finally:
            self._set_state(SubmissionState.IDLE)
        return SubmissionResult(succeeded=True, filename=filename)

    def _fail(self, message: str) -> SubmissionResult:
        logger.warning("Submission failed: %s", message)
        self.error_message = message
        try:
            self._set_state(SubmissionState.FAILED)
        finally:
            self._set_state(SubmissionState.IDLE)
        return SubmissionResult(succeeded=False, message=message)


__all__ = ["SubmissionController", "SubmissionResult", "SubmissionState"]
