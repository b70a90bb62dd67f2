"""Doc Scan API service."""
from __future__ import annotations

from .. import constants
from ..crypto import load_private_key
from ..media import Media, media_from_headers
from ..request import Payload, RequestBuilder
from ..transport import execute
from .results import CreateSessionResult, GetSessionResult
from .session_spec import SessionSpecification


class DocScanService:
    """Client for the Doc Scan (identity document verification) API.

    Example::

        service = DocScanService(sdk_id, pem)
        result = service.create_session(session_spec)
        session = service.get_session(result.session_id)

    Args:
        sdk_id: Client SDK ID from the Yoti Hub.
        pem: PEM-encoded RSA private key.
        api_url: Doc Scan API base URL (default: ``YOTI_DOC_SCAN_API`` or production).
        timeout: Optional per-request timeout, passed to ``requests``.
    """

    def __init__(
        self,
        sdk_id: str,
        pem: str | bytes,
        *,
        api_url: str | None = None,
        timeout: float | None = None,
    ):
        # Fail on bad key material before any request is attempted
        load_private_key(pem)
        self._sdk_id = sdk_id
        self._pem = pem
        self._api_url = api_url or constants.doc_scan_api_url()
        self._timeout = timeout

    @property
    def api_url(self) -> str:
        """Base URL requests are sent to; the hosted web UI lives under it too."""
        return self._api_url.rstrip("/")

    def _request(self, method: str, endpoint: str, payload: Payload | None = None):
        builder = (
            RequestBuilder()
            .with_base_url(self._api_url)
            .with_pem_string(self._pem)
            .with_endpoint(endpoint)
            .with_method(method)
            .with_query_param("sdkId", self._sdk_id)
        )
        if payload is not None:
            builder = builder.with_payload(payload)
        return builder.build()

    def create_session(self, session_spec: SessionSpecification) -> CreateSessionResult:
        """Create a session from a specification."""
        request = self._request("POST", "/sessions", Payload(session_spec))
        response = execute(request, timeout=self._timeout)
        return CreateSessionResult.from_json(response.get_parsed_response())

    def get_session(self, session_id: str) -> GetSessionResult:
        """Retrieve the state of a session, including its checks and resources."""
        request = self._request("GET", f"/sessions/{session_id}")
        response = execute(request, timeout=self._timeout)
        return GetSessionResult.from_json(response.get_parsed_response())

    def delete_session(self, session_id: str) -> None:
        """Delete a session and all of its resources."""
        request = self._request("DELETE", f"/sessions/{session_id}")
        execute(request, timeout=self._timeout)

    def get_media_content(self, session_id: str, media_id: str) -> Media:
        """Fetch media content, typed by the response's Content-Type.

        Raises:
            SchemaError: ``mimeType must be a string`` if no Content-Type is returned.
        """
        request = self._request("GET", f"/sessions/{session_id}/media/{media_id}/content")
        response = execute(request, buffer=True, timeout=self._timeout)
        return media_from_headers(response.get_parsed_response(), response.get_headers())

    def delete_media_content(self, session_id: str, media_id: str) -> None:
        """Delete a single piece of media from a session."""
        request = self._request("DELETE", f"/sessions/{session_id}/media/{media_id}/content")
        execute(request, timeout=self._timeout)
