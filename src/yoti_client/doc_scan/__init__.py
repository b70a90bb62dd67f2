"""Doc Scan (identity document verification) API."""
from .requested import (
    RequestedCheck,
    RequestedDocumentAuthenticityCheckBuilder,
    RequestedFaceMatchCheckBuilder,
    RequestedLivenessCheckBuilder,
    RequestedTask,
    RequestedTextExtractionTaskBuilder,
)
from .results import (
    BreakdownResponse,
    CheckResponse,
    CreateSessionResult,
    DetailsResponse,
    GetSessionResult,
    MediaResponse,
    RecommendationResponse,
    ReportResponse,
    ResourceContainer,
)
from .service import DocScanService
from .session_spec import (
    NotificationConfig,
    NotificationConfigBuilder,
    SdkConfig,
    SdkConfigBuilder,
    SessionSpecification,
    SessionSpecificationBuilder,
)

__all__ = [
    "DocScanService",
    "SessionSpecification",
    "SessionSpecificationBuilder",
    "NotificationConfig",
    "NotificationConfigBuilder",
    "SdkConfig",
    "SdkConfigBuilder",
    "RequestedCheck",
    "RequestedTask",
    "RequestedDocumentAuthenticityCheckBuilder",
    "RequestedFaceMatchCheckBuilder",
    "RequestedLivenessCheckBuilder",
    "RequestedTextExtractionTaskBuilder",
    "CreateSessionResult",
    "GetSessionResult",
    "CheckResponse",
    "ReportResponse",
    "RecommendationResponse",
    "BreakdownResponse",
    "DetailsResponse",
    "MediaResponse",
    "ResourceContainer",
]
