"""Yoti client: Python bindings for the Yoti Connect and Doc Scan APIs."""
from .client import Client
from .crypto import load_private_key, sign_message, verify_signature
from .doc_scan import (
    BreakdownResponse,
    CreateSessionResult,
    DetailsResponse,
    DocScanService,
    GetSessionResult,
    NotificationConfigBuilder,
    RequestedDocumentAuthenticityCheckBuilder,
    RequestedFaceMatchCheckBuilder,
    RequestedLivenessCheckBuilder,
    RequestedTextExtractionTaskBuilder,
    SdkConfigBuilder,
    SessionSpecificationBuilder,
)
from .dynamic_sharing import (
    DynamicPolicyBuilder,
    DynamicScenarioBuilder,
    ExtensionBuilder,
    LocationConstraintExtensionBuilder,
    ShareUrlResult,
    TransactionalFlowExtensionBuilder,
    WantedAttributeBuilder,
)
from .errors import ActivityDetailsError, CredentialError, RequestError, SchemaError, YotiError
from .media import Image, ImageJpeg, ImagePng, Media, MediaKind, classify_mime_type, create_media
from .profile import ActivityDetails, AgeVerification, Attribute, Profile
from .request import Payload, RequestBuilder, YotiRequest, request_can_send_payload
from .transport import YotiResponse, execute

__all__ = [
    "Client",
    "DocScanService",
    "execute",
    "YotiRequest",
    "YotiResponse",
    "Payload",
    "RequestBuilder",
    "request_can_send_payload",
    "load_private_key",
    "sign_message",
    "verify_signature",
    "YotiError",
    "RequestError",
    "SchemaError",
    "CredentialError",
    "ActivityDetailsError",
    "Media",
    "Image",
    "ImageJpeg",
    "ImagePng",
    "MediaKind",
    "classify_mime_type",
    "create_media",
    "SessionSpecificationBuilder",
    "NotificationConfigBuilder",
    "SdkConfigBuilder",
    "RequestedDocumentAuthenticityCheckBuilder",
    "RequestedFaceMatchCheckBuilder",
    "RequestedLivenessCheckBuilder",
    "RequestedTextExtractionTaskBuilder",
    "CreateSessionResult",
    "GetSessionResult",
    "BreakdownResponse",
    "DetailsResponse",
    "WantedAttributeBuilder",
    "DynamicPolicyBuilder",
    "ExtensionBuilder",
    "LocationConstraintExtensionBuilder",
    "TransactionalFlowExtensionBuilder",
    "DynamicScenarioBuilder",
    "ShareUrlResult",
    "ActivityDetails",
    "AgeVerification",
    "Attribute",
    "Profile",
]
