"""Request model and the signing request builder."""
from __future__ import annotations

import base64
import json
import time
import uuid
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any
from urllib.parse import urlencode

from . import constants
from .crypto import build_digest_message, load_private_key, read_pem_file, sign_message

PAYLOAD_METHODS = frozenset({"POST", "PUT", "PATCH"})


def request_can_send_payload(method: str) -> bool:
    """True for methods whose body is sent on the wire."""
    return method.upper() in PAYLOAD_METHODS


def to_serializable(obj: Any) -> Any:
    """Recursively convert value objects exposing ``to_json()`` into JSON data."""
    if hasattr(obj, "to_json"):
        return to_serializable(obj.to_json())
    if isinstance(obj, dict):
        return {k: to_serializable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_serializable(item) for item in obj]
    return obj


def omit_none(data: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in data.items() if v is not None}


@dataclass(frozen=True)
class Payload:
    """JSON-serializable request body."""
    data: Any

    def get_raw_data(self) -> Any:
        return self.data

    def get_payload_json(self) -> str:
        return json.dumps(to_serializable(self.data), separators=(",", ":"))

    def get_base64_payload(self) -> str:
        return base64.b64encode(self.get_payload_json().encode("utf-8")).decode("ascii")


@dataclass(frozen=True)
class YotiRequest:
    """A fully built, signed HTTP request."""
    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    payload: Payload | None = None

    def get_method(self) -> str:
        return self.method

    def get_url(self) -> str:
        return self.url

    def get_headers(self) -> dict[str, str]:
        return dict(self.headers)

    def get_payload(self) -> Payload | None:
        return self.payload

    def get_body(self) -> str | None:
        """Serialized body, or None when the method never carries one."""
        if self.payload is None or not request_can_send_payload(self.method):
            return None
        return self.payload.get_payload_json()


def sign_request(
    *,
    method: str,
    endpoint: str,
    pem: str | bytes,
    payload: Payload | None = None,
) -> dict[str, str]:
    """Build the auth headers for a request.

    ``endpoint`` is the path and query already carrying the nonce and
    timestamp, so identical inputs always yield identical headers.
    """
    private_key = load_private_key(pem)
    payload_b64 = None
    if payload is not None and request_can_send_payload(method):
        payload_b64 = payload.get_base64_payload()

    digest = sign_message(build_digest_message(method, endpoint, payload_b64), private_key)

    headers = {
        constants.AUTH_DIGEST_HEADER: digest,
        constants.SDK_HEADER: constants.SDK_IDENTIFIER,
        constants.SDK_VERSION_HEADER: f"{constants.SDK_IDENTIFIER}-{constants.SDK_VERSION}",
        "Accept": constants.CONTENT_TYPE_JSON,
    }
    if payload_b64 is not None:
        headers["Content-Type"] = constants.CONTENT_TYPE_JSON
    return headers


@dataclass(frozen=True)
class RequestBuilder:
    """Immutable builder for signed requests.

    Example::

        request = (
            RequestBuilder()
            .with_base_url(constants.doc_scan_api_url())
            .with_pem_string(pem)
            .with_endpoint("/sessions")
            .with_method("POST")
            .with_payload(Payload(session_spec))
            .with_query_param("sdkId", sdk_id)
            .build()
        )
    """
    base_url: str | None = None
    endpoint: str | None = None
    method: str = "GET"
    pem: str | bytes | None = None
    payload: Payload | None = None
    query_params: tuple[tuple[str, str], ...] = ()
    headers: tuple[tuple[str, str], ...] = ()
    nonce: str | None = None
    timestamp: int | None = None

    def with_base_url(self, base_url: str) -> RequestBuilder:
        return replace(self, base_url=base_url.rstrip("/"))

    def with_endpoint(self, endpoint: str) -> RequestBuilder:
        return replace(self, endpoint=endpoint)

    def with_method(self, method: str) -> RequestBuilder:
        return replace(self, method=method.upper())

    def with_get(self) -> RequestBuilder:
        return self.with_method("GET")

    def with_post(self) -> RequestBuilder:
        return self.with_method("POST")

    def with_pem_string(self, pem: str | bytes) -> RequestBuilder:
        return replace(self, pem=pem)

    def with_pem_file(self, path: str | Path) -> RequestBuilder:
        return replace(self, pem=read_pem_file(path))

    def with_payload(self, payload: Payload) -> RequestBuilder:
        return replace(self, payload=payload)

    def with_query_param(self, name: str, value: str) -> RequestBuilder:
        return replace(self, query_params=self.query_params + ((name, str(value)),))

    def with_header(self, name: str, value: str) -> RequestBuilder:
        return replace(self, headers=self.headers + ((name, value),))

    def with_nonce(self, nonce: str) -> RequestBuilder:
        return replace(self, nonce=nonce)

    def with_timestamp(self, timestamp: int) -> RequestBuilder:
        return replace(self, timestamp=timestamp)

    def build(self) -> YotiRequest:
        """Sign and return the request.

        Raises:
            ValueError: If base URL, endpoint or PEM key is missing.
            CredentialError: If the PEM key is malformed.
        """
        if not self.base_url:
            raise ValueError("Base URL must be specified")
        if not self.endpoint:
            raise ValueError("Endpoint must be specified")
        if self.pem is None:
            raise ValueError("PEM key must be specified")

        nonce = self.nonce or str(uuid.uuid4())
        timestamp = self.timestamp if self.timestamp is not None else int(time.time() * 1000)

        query = list(self.query_params) + [("nonce", nonce), ("timestamp", str(timestamp))]
        path_and_query = f"{self.endpoint}?{urlencode(query)}"
        url = f"{self.base_url}{path_and_query}"

        headers = sign_request(
            method=self.method,
            endpoint=path_and_query,
            pem=self.pem,
            payload=self.payload,
        )
        headers.update(dict(self.headers))

        return YotiRequest(
            method=self.method,
            url=url,
            headers=headers,
            payload=self.payload,
        )
