"""Requested checks and tasks for a Doc Scan session."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from .. import constants
from ..request import omit_none


@dataclass(frozen=True)
class RequestedCheck:
    """A check the session should perform."""
    type: str
    config: dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> dict[str, Any]:
        return {"type": self.type, "config": omit_none(self.config)}


@dataclass(frozen=True)
class RequestedTask:
    """A task the session should perform."""
    type: str
    config: dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> dict[str, Any]:
        return {"type": self.type, "config": omit_none(self.config)}


@dataclass(frozen=True)
class RequestedDocumentAuthenticityCheckBuilder:
    def build(self) -> RequestedCheck:
        return RequestedCheck(constants.ID_DOCUMENT_AUTHENTICITY)


@dataclass(frozen=True)
class RequestedFaceMatchCheckBuilder:
    manual_check: str | None = None

    def with_manual_check_always(self) -> RequestedFaceMatchCheckBuilder:
        return replace(self, manual_check=constants.ALWAYS)

    def with_manual_check_fallback(self) -> RequestedFaceMatchCheckBuilder:
        return replace(self, manual_check=constants.FALLBACK)

    def with_manual_check_never(self) -> RequestedFaceMatchCheckBuilder:
        return replace(self, manual_check=constants.NEVER)

    def build(self) -> RequestedCheck:
        if self.manual_check is None:
            raise ValueError("manual_check must be specified")
        return RequestedCheck(
            constants.ID_DOCUMENT_FACE_MATCH,
            {"manual_check": self.manual_check},
        )


@dataclass(frozen=True)
class RequestedLivenessCheckBuilder:
    liveness_type: str | None = None
    max_retries: int = 1

    def for_zoom_liveness(self) -> RequestedLivenessCheckBuilder:
        return self.for_liveness_type(constants.ZOOM)

    def for_liveness_type(self, liveness_type: str) -> RequestedLivenessCheckBuilder:
        return replace(self, liveness_type=liveness_type)

    def with_max_retries(self, max_retries: int) -> RequestedLivenessCheckBuilder:
        return replace(self, max_retries=max_retries)

    def build(self) -> RequestedCheck:
        if self.liveness_type is None:
            raise ValueError("liveness_type must be specified")
        return RequestedCheck(
            constants.LIVENESS,
            {"liveness_type": self.liveness_type, "max_retries": self.max_retries},
        )


@dataclass(frozen=True)
class RequestedTextExtractionTaskBuilder:
    manual_check: str | None = None

    def with_manual_check_always(self) -> RequestedTextExtractionTaskBuilder:
        return replace(self, manual_check=constants.ALWAYS)

    def with_manual_check_fallback(self) -> RequestedTextExtractionTaskBuilder:
        return replace(self, manual_check=constants.FALLBACK)

    def with_manual_check_never(self) -> RequestedTextExtractionTaskBuilder:
        return replace(self, manual_check=constants.NEVER)

    def build(self) -> RequestedTask:
        if self.manual_check is None:
            raise ValueError("manual_check must be specified")
        return RequestedTask(
            constants.ID_DOCUMENT_TEXT_DATA_EXTRACTION,
            {"manual_check": self.manual_check},
        )
