"""Typed results parsed from Doc Scan responses.

Each class takes the raw JSON object and validates the fields it relies on
before exposing them. Fields whose value set is owned by the API (check
results, states, recommendation values) are kept as plain strings.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .. import constants
from ..validation import is_array, is_array_of_strings, is_integer, is_object, is_string


@dataclass(frozen=True)
class CreateSessionResult:
    """Result of ``POST /sessions``."""
    client_session_token_ttl: int
    client_session_token: str
    session_id: str

    @classmethod
    def from_json(cls, raw: Any) -> CreateSessionResult:
        raw = raw if isinstance(raw, dict) else {}
        is_integer(raw.get("client_session_token_ttl"), "client_session_token_ttl")
        is_string(raw.get("client_session_token"), "client_session_token")
        is_string(raw.get("session_id"), "session_id")
        return cls(
            client_session_token_ttl=raw["client_session_token_ttl"],
            client_session_token=raw["client_session_token"],
            session_id=raw["session_id"],
        )

    def get_client_session_token_ttl(self) -> int:
        return self.client_session_token_ttl

    def get_client_session_token(self) -> str:
        return self.client_session_token

    def get_session_id(self) -> str:
        return self.session_id


@dataclass(frozen=True)
class MediaResponse:
    """Reference to media stored against a session."""
    id: str | None
    type: str | None
    created: str | None
    last_updated: str | None

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> MediaResponse:
        is_string(raw.get("id"), "id", optional=True)
        is_string(raw.get("type"), "type", optional=True)
        return cls(
            id=raw.get("id"),
            type=raw.get("type"),
            created=raw.get("created"),
            last_updated=raw.get("last_updated"),
        )


def _objects(raw: dict[str, Any], name: str) -> list[dict[str, Any]]:
    """Entries of an optional array field, each checked to be an object."""
    items = raw.get(name)
    is_array(items, name, optional=True)
    for item in items or []:
        is_object(item, f"{name} entry")
    return items or []


def _object(raw: dict[str, Any], name: str) -> dict[str, Any] | None:
    value = raw.get(name)
    is_object(value, name, optional=True)
    return value


def _media_or_none(raw: dict[str, Any]) -> MediaResponse | None:
    media = _object(raw, "media")
    return MediaResponse.from_json(media) if media is not None else None


@dataclass(frozen=True)
class DetailsResponse:
    name: Any = None
    value: Any = None

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> DetailsResponse:
        return cls(name=raw.get("name"), value=raw.get("value"))

    def get_name(self) -> Any:
        return self.name

    def get_value(self) -> Any:
        return self.value


@dataclass(frozen=True)
class BreakdownResponse:
    sub_check: Any
    result: Any
    details: tuple[DetailsResponse, ...] = ()

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> BreakdownResponse:
        return cls(
            sub_check=raw.get("sub_check"),
            result=raw.get("result"),
            details=tuple(DetailsResponse.from_json(d) for d in _objects(raw, "details")),
        )

    def get_sub_check(self) -> Any:
        return self.sub_check

    def get_result(self) -> Any:
        return self.result

    def get_details(self) -> list[DetailsResponse]:
        return list(self.details)


@dataclass(frozen=True)
class RecommendationResponse:
    value: str | None = None
    reason: str | None = None
    recovery_suggestion: str | None = None

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> RecommendationResponse:
        is_string(raw.get("value"), "value", optional=True)
        is_string(raw.get("reason"), "reason", optional=True)
        is_string(raw.get("recovery_suggestion"), "recovery_suggestion", optional=True)
        return cls(
            value=raw.get("value"),
            reason=raw.get("reason"),
            recovery_suggestion=raw.get("recovery_suggestion"),
        )


@dataclass(frozen=True)
class ReportResponse:
    recommendation: RecommendationResponse | None = None
    breakdown: tuple[BreakdownResponse, ...] = ()

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> ReportResponse:
        recommendation = _object(raw, "recommendation")
        return cls(
            recommendation=(
                RecommendationResponse.from_json(recommendation)
                if recommendation is not None
                else None
            ),
            breakdown=tuple(BreakdownResponse.from_json(b) for b in _objects(raw, "breakdown")),
        )


@dataclass(frozen=True)
class GeneratedMedia:
    id: str | None
    type: str | None

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> GeneratedMedia:
        return cls(id=raw.get("id"), type=raw.get("type"))


@dataclass(frozen=True)
class CheckResponse:
    """A single check; ``type`` decides which accessor the caller uses."""
    id: str | None
    type: str | None
    state: str | None
    report: ReportResponse | None
    resources_used: tuple[str, ...]
    generated_media: tuple[GeneratedMedia, ...]
    created: str | None
    last_updated: str | None

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> CheckResponse:
        is_string(raw.get("id"), "id", optional=True)
        is_string(raw.get("type"), "type", optional=True)
        is_string(raw.get("state"), "state", optional=True)
        is_array_of_strings(raw.get("resources_used"), "resources_used", optional=True)
        report = _object(raw, "report")
        return cls(
            id=raw.get("id"),
            type=raw.get("type"),
            state=raw.get("state"),
            report=ReportResponse.from_json(report) if report is not None else None,
            resources_used=tuple(raw.get("resources_used") or ()),
            generated_media=tuple(GeneratedMedia.from_json(m) for m in _objects(raw, "generated_media")),
            created=raw.get("created"),
            last_updated=raw.get("last_updated"),
        )


@dataclass(frozen=True)
class TaskResponse:
    id: str | None
    type: str | None
    state: str | None
    created: str | None
    last_updated: str | None

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> TaskResponse:
        return cls(
            id=raw.get("id"),
            type=raw.get("type"),
            state=raw.get("state"),
            created=raw.get("created"),
            last_updated=raw.get("last_updated"),
        )


@dataclass(frozen=True)
class PageResponse:
    capture_method: str | None
    media: MediaResponse | None

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> PageResponse:
        return cls(capture_method=raw.get("capture_method"), media=_media_or_none(raw))


@dataclass(frozen=True)
class DocumentFieldsResponse:
    media: MediaResponse | None

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> DocumentFieldsResponse:
        return cls(media=_media_or_none(raw))


@dataclass(frozen=True)
class IdDocumentResourceResponse:
    id: str | None
    document_type: str | None
    issuing_country: str | None
    tasks: tuple[TaskResponse, ...]
    pages: tuple[PageResponse, ...]
    document_fields: DocumentFieldsResponse | None

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> IdDocumentResourceResponse:
        document_fields = _object(raw, "document_fields")
        return cls(
            id=raw.get("id"),
            document_type=raw.get("document_type"),
            issuing_country=raw.get("issuing_country"),
            tasks=tuple(TaskResponse.from_json(t) for t in _objects(raw, "tasks")),
            pages=tuple(PageResponse.from_json(p) for p in _objects(raw, "pages")),
            document_fields=(
                DocumentFieldsResponse.from_json(document_fields)
                if document_fields is not None
                else None
            ),
        )


@dataclass(frozen=True)
class LivenessResourceResponse:
    id: str | None
    liveness_type: str | None
    frames: tuple[MediaResponse, ...]

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> LivenessResourceResponse:
        frames = (_media_or_none(f) for f in _objects(raw, "frames"))
        return cls(
            id=raw.get("id"),
            liveness_type=raw.get("liveness_type"),
            frames=tuple(m for m in frames if m is not None),
        )


@dataclass(frozen=True)
class ResourceContainer:
    id_documents: tuple[IdDocumentResourceResponse, ...] = ()
    liveness_capture: tuple[LivenessResourceResponse, ...] = ()

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> ResourceContainer:
        return cls(
            id_documents=tuple(
                IdDocumentResourceResponse.from_json(d) for d in _objects(raw, "id_documents")
            ),
            liveness_capture=tuple(
                LivenessResourceResponse.from_json(r) for r in _objects(raw, "liveness_capture")
            ),
        )

    def get_zoom_liveness_resources(self) -> list[LivenessResourceResponse]:
        return [r for r in self.liveness_capture if r.liveness_type == constants.ZOOM]


@dataclass(frozen=True)
class GetSessionResult:
    """Result of ``GET /sessions/{id}``."""
    session_id: str
    client_session_token_ttl: int | None = None
    client_session_token: str | None = None
    user_tracking_id: str | None = None
    state: str | None = None
    checks: tuple[CheckResponse, ...] = ()
    resources: ResourceContainer | None = None

    @classmethod
    def from_json(cls, raw: Any) -> GetSessionResult:
        raw = raw if isinstance(raw, dict) else {}
        is_string(raw.get("session_id"), "session_id")
        is_integer(raw.get("client_session_token_ttl"), "client_session_token_ttl", optional=True)
        is_string(raw.get("client_session_token"), "client_session_token", optional=True)
        is_string(raw.get("user_tracking_id"), "user_tracking_id", optional=True)
        is_string(raw.get("state"), "state", optional=True)
        checks = _objects(raw, "checks")
        resources = _object(raw, "resources")
        return cls(
            session_id=raw["session_id"],
            client_session_token_ttl=raw.get("client_session_token_ttl"),
            client_session_token=raw.get("client_session_token"),
            user_tracking_id=raw.get("user_tracking_id"),
            state=raw.get("state"),
            checks=tuple(CheckResponse.from_json(c) for c in checks),
            resources=ResourceContainer.from_json(resources) if resources is not None else None,
        )

    def get_session_id(self) -> str:
        return self.session_id

    def _checks_of_type(self, check_type: str) -> list[CheckResponse]:
        return [c for c in self.checks if c.type == check_type]

    def get_authenticity_checks(self) -> list[CheckResponse]:
        return self._checks_of_type(constants.ID_DOCUMENT_AUTHENTICITY)

    def get_face_match_checks(self) -> list[CheckResponse]:
        return self._checks_of_type(constants.ID_DOCUMENT_FACE_MATCH)

    def get_text_data_checks(self) -> list[CheckResponse]:
        return self._checks_of_type(constants.ID_DOCUMENT_TEXT_DATA_CHECK)

    def get_liveness_checks(self) -> list[CheckResponse]:
        return self._checks_of_type(constants.LIVENESS)
