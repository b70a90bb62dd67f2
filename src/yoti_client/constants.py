"""API endpoints, header names and attribute names."""
from __future__ import annotations

import os

SDK_IDENTIFIER = "Python"
SDK_VERSION = "1.0.0"

DEFAULT_CONNECT_API = "https://api.yoti.com/api/v1"
DEFAULT_DOC_SCAN_API = "https://api.yoti.com/idverify/v1"


def connect_api_url() -> str:
    return os.environ.get("YOTI_CONNECT_API", DEFAULT_CONNECT_API)


def doc_scan_api_url() -> str:
    return os.environ.get("YOTI_DOC_SCAN_API", DEFAULT_DOC_SCAN_API)


# Request headers
AUTH_DIGEST_HEADER = "X-Yoti-Auth-Digest"
AUTH_KEY_HEADER = "X-Yoti-Auth-Key"
SDK_HEADER = "X-Yoti-SDK"
SDK_VERSION_HEADER = "X-Yoti-SDK-Version"

# Mime types
CONTENT_TYPE_JSON = "application/json"
MIME_TYPE_JPEG = "image/jpeg"
MIME_TYPE_PNG = "image/png"

# Profile attribute names
ATTR_FAMILY_NAME = "family_name"
ATTR_GIVEN_NAMES = "given_names"
ATTR_FULL_NAME = "full_name"
ATTR_DATE_OF_BIRTH = "date_of_birth"
ATTR_AGE_OVER = "age_over:"
ATTR_AGE_UNDER = "age_under:"
ATTR_GENDER = "gender"
ATTR_POSTAL_ADDRESS = "postal_address"
ATTR_STRUCTURED_POSTAL_ADDRESS = "structured_postal_address"
ATTR_NATIONALITY = "nationality"
ATTR_PHONE_NUMBER = "phone_number"
ATTR_SELFIE = "selfie"
ATTR_EMAIL_ADDRESS = "email_address"
ATTR_DOCUMENT_DETAILS = "document_details"
ATTR_DOCUMENT_IMAGES = "document_images"

# Doc Scan check types
ID_DOCUMENT_AUTHENTICITY = "ID_DOCUMENT_AUTHENTICITY"
ID_DOCUMENT_FACE_MATCH = "ID_DOCUMENT_FACE_MATCH"
ID_DOCUMENT_TEXT_DATA_CHECK = "ID_DOCUMENT_TEXT_DATA_CHECK"
ID_DOCUMENT_TEXT_DATA_EXTRACTION = "ID_DOCUMENT_TEXT_DATA_EXTRACTION"
LIVENESS = "LIVENESS"
ZOOM = "ZOOM"

ALWAYS = "ALWAYS"
FALLBACK = "FALLBACK"
NEVER = "NEVER"

CAMERA = "CAMERA"
CAMERA_AND_UPLOAD = "CAMERA_AND_UPLOAD"

# Notification topics
RESOURCE_UPDATE = "RESOURCE_UPDATE"
TASK_COMPLETION = "TASK_COMPLETION"
CHECK_COMPLETION = "CHECK_COMPLETION"
SESSION_COMPLETION = "SESSION_COMPLETION"

# Dynamic sharing
SELFIE_AUTH_TYPE = 1
PIN_AUTH_TYPE = 2
LOCATION_CONSTRAINT = "LOCATION_CONSTRAINT"
TRANSACTIONAL_FLOW = "TRANSACTIONAL_FLOW"
