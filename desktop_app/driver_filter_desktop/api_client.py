"""HTTP client for the driver filter service."""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urljoin

import requests

from .request_builder import FilterRequest

logger = logging.getLogger(__name__)

XLSX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


class ApiError(RuntimeError):
    """Failure while talking to the service."""

    def __init__(self, message: str, *, response: Optional[requests.Response] = None) -> None:
        super().__init__(message)
        self.response = response

    @property
    def status_code(self) -> Optional[int]:
        return self.response.status_code if self.response is not None else None


class ServiceError(ApiError):
    """The service answered with a non-success status."""


class TransportError(ApiError):
    """The request did not complete or its response could not be read."""


class ApiClient:
    """Wraps the calls to the file processing service."""

    def __init__(self, base_url: str, timeout: Optional[float] = None) -> None:
        self.base_url = base_url.rstrip("/") + "/"
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = urljoin(self.base_url, path.lstrip("/"))
        kwargs.setdefault("timeout", self.timeout)
        try:
            response = requests.request(method, url, **kwargs)
        except requests.RequestException as exc:
            raise TransportError(str(exc)) from exc

        if not response.ok:
            raise ServiceError(self._error_message(response), response=response)
        return response

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            data = None
        message = data.get("error") if isinstance(data, dict) else None
        if not message:
            return f"HTTP error: {response.status_code}"
        return str(message)

    # ------------------------------------------------------------------
    # Filtering
    # ------------------------------------------------------------------
    def filter_driver(self, request: FilterRequest) -> bytes:
        """Upload the spreadsheet and return the filtered file unchanged."""

        source = request.source_file
        logger.info("Sending %s for driver %r", source.name, request.fields.get("driver_name"))
        with source.open() as file_handle:
            files = {"file": (source.name, file_handle, XLSX_CONTENT_TYPE)}
            response = self._request("POST", "/filter-driver", data=dict(request.fields), files=files)
        return response.content


__all__ = ["ApiClient", "ApiError", "ServiceError", "TransportError"]
