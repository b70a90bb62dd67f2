"""Dynamic sharing policy: which attributes and auth types a share requests."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from .. import constants
from ..request import omit_none
from ..validation import is_boolean


@dataclass(frozen=True)
class WantedAttribute:
    name: str
    derivation: str | None = None
    accept_self_asserted: bool | None = None
    optional: bool = False

    @property
    def key(self) -> str:
        return f"{self.name}-{self.derivation}" if self.derivation else self.name

    def to_json(self) -> dict[str, Any]:
        return omit_none({
            "name": self.name,
            "derivation": self.derivation,
            "optional": self.optional,
            "accept_self_asserted": self.accept_self_asserted,
        })


@dataclass(frozen=True)
class WantedAttributeBuilder:
    name: str | None = None
    derivation: str | None = None
    accept_self_asserted: bool | None = None
    optional: bool = False

    def with_name(self, name: str) -> WantedAttributeBuilder:
        return replace(self, name=name)

    def with_derivation(self, derivation: str) -> WantedAttributeBuilder:
        return replace(self, derivation=derivation)

    def with_accept_self_asserted(self, accept: bool = True) -> WantedAttributeBuilder:
        is_boolean(accept, "accept_self_asserted")
        return replace(self, accept_self_asserted=accept)

    def with_optional(self, optional: bool = True) -> WantedAttributeBuilder:
        is_boolean(optional, "optional")
        return replace(self, optional=optional)

    def build(self) -> WantedAttribute:
        if not self.name:
            raise ValueError("Wanted attribute name must not be empty")
        return WantedAttribute(self.name, self.derivation, self.accept_self_asserted, self.optional)


@dataclass(frozen=True)
class DynamicPolicy:
    wanted_attributes: tuple[WantedAttribute, ...] = ()
    wanted_auth_types: tuple[int, ...] = ()
    wanted_remember_me: bool = False
    wanted_remember_me_optional: bool = False

    def to_json(self) -> dict[str, Any]:
        return {
            "wanted": list(self.wanted_attributes),
            "wanted_auth_types": list(self.wanted_auth_types),
            "wanted_remember_me": self.wanted_remember_me,
            "wanted_remember_me_optional": self.wanted_remember_me_optional,
        }


@dataclass(frozen=True)
class DynamicPolicyBuilder:
    """Builds a :class:`DynamicPolicy`.

    Attributes are keyed by name and derivation: adding the same pair again
    replaces the earlier entry in its original position.
    """
    wanted: tuple[WantedAttribute, ...] = ()
    wanted_auth_types: tuple[int, ...] = ()
    wanted_remember_me: bool = False
    wanted_remember_me_optional: bool = False

    def with_wanted_attribute(self, wanted_attribute: WantedAttribute) -> DynamicPolicyBuilder:
        wanted = list(self.wanted)
        for i, existing in enumerate(wanted):
            if existing.key == wanted_attribute.key:
                wanted[i] = wanted_attribute
                break
        else:
            wanted.append(wanted_attribute)
        return replace(self, wanted=tuple(wanted))

    def with_wanted_attribute_by_name(
        self, name: str, accept_self_asserted: bool | None = None
    ) -> DynamicPolicyBuilder:
        builder = WantedAttributeBuilder().with_name(name)
        if accept_self_asserted is not None:
            builder = builder.with_accept_self_asserted(accept_self_asserted)
        return self.with_wanted_attribute(builder.build())

    def with_family_name(self) -> DynamicPolicyBuilder:
        return self.with_wanted_attribute_by_name(constants.ATTR_FAMILY_NAME)

    def with_given_names(self) -> DynamicPolicyBuilder:
        return self.with_wanted_attribute_by_name(constants.ATTR_GIVEN_NAMES)

    def with_full_name(self) -> DynamicPolicyBuilder:
        return self.with_wanted_attribute_by_name(constants.ATTR_FULL_NAME)

    def with_date_of_birth(self) -> DynamicPolicyBuilder:
        return self.with_wanted_attribute_by_name(constants.ATTR_DATE_OF_BIRTH)

    def with_age_derived_attribute(self, derivation: str) -> DynamicPolicyBuilder:
        attribute = (
            WantedAttributeBuilder()
            .with_name(constants.ATTR_DATE_OF_BIRTH)
            .with_derivation(derivation)
            .build()
        )
        return self.with_wanted_attribute(attribute)

    def with_age_over(self, age: int) -> DynamicPolicyBuilder:
        return self.with_age_derived_attribute(f"{constants.ATTR_AGE_OVER}{int(age)}")

    def with_age_under(self, age: int) -> DynamicPolicyBuilder:
        return self.with_age_derived_attribute(f"{constants.ATTR_AGE_UNDER}{int(age)}")

    def with_gender(self) -> DynamicPolicyBuilder:
        return self.with_wanted_attribute_by_name(constants.ATTR_GENDER)

    def with_postal_address(self) -> DynamicPolicyBuilder:
        return self.with_wanted_attribute_by_name(constants.ATTR_POSTAL_ADDRESS)

    def with_structured_postal_address(self) -> DynamicPolicyBuilder:
        return self.with_wanted_attribute_by_name(constants.ATTR_STRUCTURED_POSTAL_ADDRESS)

    def with_nationality(self) -> DynamicPolicyBuilder:
        return self.with_wanted_attribute_by_name(constants.ATTR_NATIONALITY)

    def with_phone_number(self) -> DynamicPolicyBuilder:
        return self.with_wanted_attribute_by_name(constants.ATTR_PHONE_NUMBER)

    def with_selfie(self) -> DynamicPolicyBuilder:
        return self.with_wanted_attribute_by_name(constants.ATTR_SELFIE)

    def with_email(self) -> DynamicPolicyBuilder:
        return self.with_wanted_attribute_by_name(constants.ATTR_EMAIL_ADDRESS)

    def with_document_details(self) -> DynamicPolicyBuilder:
        return self.with_wanted_attribute_by_name(constants.ATTR_DOCUMENT_DETAILS)

    def with_document_images(self) -> DynamicPolicyBuilder:
        return self.with_wanted_attribute_by_name(constants.ATTR_DOCUMENT_IMAGES)

    def with_wanted_auth_type(self, auth_type: int, enabled: bool = True) -> DynamicPolicyBuilder:
        auth_types = tuple(t for t in self.wanted_auth_types if t != auth_type)
        if enabled:
            auth_types += (auth_type,)
        return replace(self, wanted_auth_types=auth_types)

    def with_selfie_auth(self, enabled: bool = True) -> DynamicPolicyBuilder:
        return self.with_wanted_auth_type(constants.SELFIE_AUTH_TYPE, enabled)

    def with_pin_auth(self, enabled: bool = True) -> DynamicPolicyBuilder:
        return self.with_wanted_auth_type(constants.PIN_AUTH_TYPE, enabled)

    def with_wanted_remember_me(self, wanted: bool = True) -> DynamicPolicyBuilder:
        is_boolean(wanted, "wanted_remember_me")
        return replace(self, wanted_remember_me=wanted)

    def with_wanted_remember_me_optional(self, optional: bool = True) -> DynamicPolicyBuilder:
        is_boolean(optional, "wanted_remember_me_optional")
        return replace(self, wanted_remember_me_optional=optional)

    def build(self) -> DynamicPolicy:
        return DynamicPolicy(
            wanted_attributes=self.wanted,
            wanted_auth_types=self.wanted_auth_types,
            wanted_remember_me=self.wanted_remember_me,
            wanted_remember_me_optional=self.wanted_remember_me_optional,
        )
