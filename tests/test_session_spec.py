"""Tests for the session specification builders."""
import json

import pytest

from yoti_client.doc_scan import (
    NotificationConfigBuilder,
    RequestedDocumentAuthenticityCheckBuilder,
    RequestedFaceMatchCheckBuilder,
    RequestedLivenessCheckBuilder,
    RequestedTextExtractionTaskBuilder,
    SdkConfigBuilder,
    SessionSpecificationBuilder,
)
from yoti_client.request import Payload


def _json(value):
    return json.loads(Payload(value).get_payload_json())


class TestSessionSpecificationBuilder:
    def test_empty_spec(self):
        spec = SessionSpecificationBuilder().build()
        assert _json(spec) == {"requested_checks": [], "requested_tasks": []}

    def test_full_spec(self):
        notifications = (
            NotificationConfigBuilder()
            .with_endpoint("https://example.com/notify")
            .with_auth_token("secret")
            .for_session_completion()
            .for_check_completion()
            .build()
        )
        sdk_config = (
            SdkConfigBuilder()
            .with_allows_camera()
            .with_primary_colour("#2d9fff")
            .with_locale("en-GB")
            .with_success_url("https://example.com/success")
            .build()
        )
        spec = (
            SessionSpecificationBuilder()
            .with_client_session_token_ttl(600)
            .with_resources_ttl(90000)
            .with_user_tracking_id("user-1")
            .with_notifications(notifications)
            .with_requested_check(RequestedDocumentAuthenticityCheckBuilder().build())
            .with_requested_check(RequestedFaceMatchCheckBuilder().with_manual_check_never().build())
            .with_requested_check(RequestedLivenessCheckBuilder().for_zoom_liveness().build())
            .with_requested_task(RequestedTextExtractionTaskBuilder().with_manual_check_always().build())
            .with_sdk_config(sdk_config)
            .build()
        )

        assert _json(spec) == {
            "client_session_token_ttl": 600,
            "resources_ttl": 90000,
            "user_tracking_id": "user-1",
            "notifications": {
                "auth_token": "secret",
                "endpoint": "https://example.com/notify",
                "topics": ["SESSION_COMPLETION", "CHECK_COMPLETION"],
            },
            "requested_checks": [
                {"type": "ID_DOCUMENT_AUTHENTICITY", "config": {}},
                {"type": "ID_DOCUMENT_FACE_MATCH", "config": {"manual_check": "NEVER"}},
                {"type": "LIVENESS", "config": {"liveness_type": "ZOOM", "max_retries": 1}},
            ],
            "requested_tasks": [
                {"type": "ID_DOCUMENT_TEXT_DATA_EXTRACTION", "config": {"manual_check": "ALWAYS"}},
            ],
            "sdk_config": {
                "allowed_capture_methods": "CAMERA",
                "primary_colour": "#2d9fff",
                "locale": "en-GB",
                "success_url": "https://example.com/success",
            },
        }

    def test_builders_are_immutable(self):
        base = SessionSpecificationBuilder().with_client_session_token_ttl(100)
        with_check = base.with_requested_check(RequestedDocumentAuthenticityCheckBuilder().build())
        assert base.build().requested_checks == ()
        assert len(with_check.build().requested_checks) == 1
        assert with_check.build().client_session_token_ttl == 100

    def test_order_independent(self):
        check = RequestedDocumentAuthenticityCheckBuilder().build()
        a = SessionSpecificationBuilder().with_user_tracking_id("u").with_requested_check(check).build()
        b = SessionSpecificationBuilder().with_requested_check(check).with_user_tracking_id("u").build()
        assert a == b


class TestRequiredParts:
    def test_face_match_requires_manual_check(self):
        with pytest.raises(ValueError, match="manual_check"):
            RequestedFaceMatchCheckBuilder().build()

    def test_liveness_requires_type(self):
        with pytest.raises(ValueError, match="liveness_type"):
            RequestedLivenessCheckBuilder().with_max_retries(3).build()

    def test_text_extraction_requires_manual_check(self):
        with pytest.raises(ValueError, match="manual_check"):
            RequestedTextExtractionTaskBuilder().build()

    def test_notifications_require_endpoint(self):
        with pytest.raises(ValueError, match="endpoint"):
            NotificationConfigBuilder().for_task_completion().build()


def test_notification_topics_are_unique():
    config = (
        NotificationConfigBuilder()
        .with_endpoint("https://x")
        .for_resource_update()
        .for_resource_update()
        .build()
    )
    assert config.topics == ("RESOURCE_UPDATE",)
    assert "auth_token" not in config.to_json()


def test_liveness_max_retries():
    check = RequestedLivenessCheckBuilder().for_zoom_liveness().with_max_retries(5).build()
    assert check.to_json()["config"]["max_retries"] == 5
