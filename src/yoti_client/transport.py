"""HTTP request execution."""
from __future__ import annotations

import sys
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any, Mapping

import requests
from requests.structures import CaseInsensitiveDict

from .errors import RequestError
from .request import YotiRequest


@dataclass(frozen=True)
class YotiResponse:
    """Parsed API response.

    ``parsed_response`` holds decoded JSON, raw bytes for buffered requests,
    or None for an empty body.
    """
    parsed_response: Any
    status_code: int
    receipt: Any = None
    headers: Mapping[str, str] = field(default_factory=CaseInsensitiveDict)

    def get_parsed_response(self) -> Any:
        return self.parsed_response

    def get_status_code(self) -> int:
        return self.status_code

    def get_receipt(self) -> Any:
        return self.receipt

    def get_headers(self) -> Mapping[str, str]:
        return self.headers


def _status_text(resp: requests.Response) -> str:
    if resp.reason:
        return resp.reason
    try:
        return HTTPStatus(resp.status_code).phrase
    except ValueError:
        return f"HTTP {resp.status_code}"


def _log_error(message: str) -> None:
    print(f"Error getting data from Connect API: {message}", file=sys.stderr)


def execute(
    yoti_request: YotiRequest,
    buffer: bool = False,
    timeout: float | None = None,
) -> YotiResponse:
    """Send a request and wrap the response.

    Args:
        yoti_request: The signed request.
        buffer: Return the body as raw bytes instead of parsing JSON.
        timeout: Passed straight to ``requests``; no timeout by default.

    Raises:
        RequestError: On a non-2xx status, with the status text as message.
        requests.RequestException: On transport failures, unchanged.
        ValueError: If a non-buffered body is not valid JSON.
    """
    try:
        resp = requests.request(
            yoti_request.get_method(),
            yoti_request.get_url(),
            data=yoti_request.get_body(),
            headers=yoti_request.get_headers(),
            timeout=timeout,
        )
    except requests.RequestException as exc:
        _log_error(str(exc))
        raise

    headers = CaseInsensitiveDict(resp.headers)

    if not 200 <= resp.status_code < 300:
        message = _status_text(resp)
        _log_error(message)
        raise RequestError(
            message,
            resp.status_code,
            YotiResponse(resp.content, resp.status_code, None, headers),
        )

    parsed_response: Any = None
    receipt: Any = None

    if buffer:
        parsed_response = resp.content
    elif resp.text:
        parsed_response = resp.json()
        if isinstance(parsed_response, dict):
            receipt = parsed_response.get("receipt")

    return YotiResponse(parsed_response, resp.status_code, receipt, headers)
