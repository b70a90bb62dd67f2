"""Tests for the dynamic sharing builders."""
import json

import pytest

from yoti_client.dynamic_sharing import (
    DynamicPolicyBuilder,
    DynamicScenarioBuilder,
    ExtensionBuilder,
    LocationConstraintExtensionBuilder,
    ShareUrlResult,
    TransactionalFlowExtensionBuilder,
    WantedAttributeBuilder,
)
from yoti_client.errors import SchemaError
from yoti_client.request import Payload


def _json(value):
    return json.loads(Payload(value).get_payload_json())


class TestWantedAttributeBuilder:
    def test_builds_attribute(self):
        attribute = WantedAttributeBuilder().with_name("given_names").build()
        assert _json(attribute) == {"name": "given_names", "optional": False}

    def test_accept_self_asserted(self):
        attribute = WantedAttributeBuilder().with_name("email_address").with_accept_self_asserted().build()
        assert attribute.to_json()["accept_self_asserted"] is True

    def test_requires_name(self):
        with pytest.raises(ValueError, match="name"):
            WantedAttributeBuilder().build()


class TestDynamicPolicyBuilder:
    def test_named_attributes(self):
        policy = (
            DynamicPolicyBuilder()
            .with_full_name()
            .with_selfie()
            .with_phone_number()
            .with_wanted_attribute_by_name("email_address")
            .build()
        )
        names = [a["name"] for a in _json(policy)["wanted"]]
        assert names == ["full_name", "selfie", "phone_number", "email_address"]

    def test_age_over_derivation(self):
        policy = DynamicPolicyBuilder().with_age_over(18).with_age_under(30).build()
        wanted = _json(policy)["wanted"]
        assert wanted == [
            {"name": "date_of_birth", "derivation": "age_over:18", "optional": False},
            {"name": "date_of_birth", "derivation": "age_under:30", "optional": False},
        ]

    def test_duplicate_attributes_collapse(self):
        policy = (
            DynamicPolicyBuilder()
            .with_given_names()
            .with_age_over(18)
            .with_given_names()
            .with_age_over(18)
            .with_date_of_birth()
            .build()
        )
        keys = [a.key for a in policy.wanted_attributes]
        assert keys == ["given_names", "date_of_birth-age_over:18", "date_of_birth"]

    def test_auth_types(self):
        policy = DynamicPolicyBuilder().with_selfie_auth().with_pin_auth().with_selfie_auth(False).build()
        assert _json(policy)["wanted_auth_types"] == [2]

    def test_remember_me(self):
        policy = DynamicPolicyBuilder().with_wanted_remember_me().build()
        assert _json(policy)["wanted_remember_me"] is True
        assert _json(policy)["wanted_remember_me_optional"] is False

    def test_builder_is_immutable(self):
        base = DynamicPolicyBuilder().with_full_name()
        base.with_selfie()
        assert len(base.build().wanted_attributes) == 1


class TestExtensions:
    def test_location_constraint(self):
        extension = (
            LocationConstraintExtensionBuilder()
            .with_latitude(51.5074)
            .with_longitude(-0.1278)
            .with_radius(6000)
            .build()
        )
        assert _json(extension) == {
            "type": "LOCATION_CONSTRAINT",
            "content": {
                "expected_device_location": {
                    "latitude": 51.5074,
                    "longitude": -0.1278,
                    "radius": 6000,
                    "max_uncertainty_radius": 150,
                }
            },
        }

    def test_location_requires_coordinates(self):
        with pytest.raises(ValueError, match="latitude"):
            LocationConstraintExtensionBuilder().with_latitude(1).build()

    def test_location_rejects_non_numbers(self):
        with pytest.raises(SchemaError, match="latitude must be a number"):
            LocationConstraintExtensionBuilder().with_latitude("51.5")

    def test_transactional_flow(self):
        extension = TransactionalFlowExtensionBuilder().with_content({"ref": 1}).build()
        assert _json(extension) == {"type": "TRANSACTIONAL_FLOW", "content": {"ref": 1}}

    def test_generic_extension(self):
        extension = ExtensionBuilder().with_type("CUSTOM").with_content([1]).build()
        assert _json(extension) == {"type": "CUSTOM", "content": [1]}

    def test_generic_extension_requires_type(self):
        with pytest.raises(ValueError):
            ExtensionBuilder().with_content([1]).build()


class TestDynamicScenarioBuilder:
    def test_builds_scenario(self):
        policy = DynamicPolicyBuilder().with_full_name().build()
        extension = TransactionalFlowExtensionBuilder().with_content("x").build()
        scenario = (
            DynamicScenarioBuilder()
            .with_extension(extension)
            .with_policy(policy)
            .with_callback_endpoint("/profile")
            .build()
        )
        data = _json(scenario)
        assert data["callback_endpoint"] == "/profile"
        assert data["policy"]["wanted"][0]["name"] == "full_name"
        assert data["extensions"] == [{"type": "TRANSACTIONAL_FLOW", "content": "x"}]

    def test_requires_policy(self):
        with pytest.raises(ValueError, match="policy"):
            DynamicScenarioBuilder().with_callback_endpoint("/profile").build()

    def test_requires_callback(self):
        with pytest.raises(ValueError, match="callback_endpoint"):
            DynamicScenarioBuilder().with_policy(DynamicPolicyBuilder().build()).build()


class TestShareUrlResult:
    def test_parses(self):
        result = ShareUrlResult.from_json({"qrcode": "https://code.yoti.com/abc", "ref_id": "ref"})
        assert result.get_share_url() == "https://code.yoti.com/abc"
        assert result.get_ref_id() == "ref"

    def test_requires_qrcode(self):
        with pytest.raises(SchemaError, match="qrcode must be a string"):
            ShareUrlResult.from_json({"ref_id": "ref"})


def test_flags_must_be_booleans():
    with pytest.raises(SchemaError, match="accept_self_asserted must be a boolean"):
        WantedAttributeBuilder().with_accept_self_asserted("yes")
    with pytest.raises(SchemaError, match="wanted_remember_me must be a boolean"):
        DynamicPolicyBuilder().with_wanted_remember_me(1)


def test_optional_attribute():
    attribute = WantedAttributeBuilder().with_name("email_address").with_optional().build()
    assert _json(attribute) == {"name": "email_address", "optional": True}


def test_remember_me_optional():
    policy = DynamicPolicyBuilder().with_wanted_remember_me().with_wanted_remember_me_optional().build()
    data = _json(policy)
    assert data["wanted_remember_me"] is True
    assert data["wanted_remember_me_optional"] is True


def test_duplicate_attribute_replaces_earlier_entry_in_place():
    self_asserted = WantedAttributeBuilder().with_name("given_names").with_accept_self_asserted().build()
    policy = (
        DynamicPolicyBuilder()
        .with_given_names()
        .with_full_name()
        .with_wanted_attribute(self_asserted)
        .build()
    )
    assert [a.name for a in policy.wanted_attributes] == ["given_names", "full_name"]
    assert policy.wanted_attributes[0].accept_self_asserted is True
