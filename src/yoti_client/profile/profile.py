"""User profile assembled from decrypted attributes."""
from __future__ import annotations

from typing import Any, Iterable

from .. import constants
from .attribute import AgeVerification, Attribute, is_age_verification


class Profile:
    """Attributes shared by the user, keyed by name."""

    def __init__(self, attributes: Iterable[Attribute] = ()):
        self._attributes: dict[str, Attribute] = {a.name: a for a in attributes}

    def get_attribute(self, name: str) -> Attribute | None:
        return self._attributes.get(name)

    def get_attributes_list(self) -> list[Attribute]:
        return list(self._attributes.values())

    def _value(self, name: str) -> Any:
        attribute = self._attributes.get(name)
        return attribute.value if attribute is not None else None

    @property
    def selfie(self) -> Attribute | None:
        return self._attributes.get(constants.ATTR_SELFIE)

    @property
    def full_name(self) -> str | None:
        return self._value(constants.ATTR_FULL_NAME)

    @property
    def given_names(self) -> str | None:
        return self._value(constants.ATTR_GIVEN_NAMES)

    @property
    def family_name(self) -> str | None:
        return self._value(constants.ATTR_FAMILY_NAME)

    @property
    def date_of_birth(self) -> Any:
        return self._value(constants.ATTR_DATE_OF_BIRTH)

    @property
    def gender(self) -> str | None:
        return self._value(constants.ATTR_GENDER)

    @property
    def nationality(self) -> str | None:
        return self._value(constants.ATTR_NATIONALITY)

    @property
    def phone_number(self) -> str | None:
        return self._value(constants.ATTR_PHONE_NUMBER)

    @property
    def email_address(self) -> str | None:
        return self._value(constants.ATTR_EMAIL_ADDRESS)

    @property
    def postal_address(self) -> str | None:
        return self._value(constants.ATTR_POSTAL_ADDRESS)

    @property
    def structured_postal_address(self) -> Any:
        return self._value(constants.ATTR_STRUCTURED_POSTAL_ADDRESS)

    def get_age_verifications(self) -> list[AgeVerification]:
        return [
            AgeVerification.from_attribute(a)
            for a in self._attributes.values()
            if is_age_verification(a.name)
        ]

    def find_age_over_verification(self, age: int) -> AgeVerification | None:
        attribute = self._attributes.get(f"{constants.ATTR_AGE_OVER}{age}")
        return AgeVerification.from_attribute(attribute) if attribute else None

    def find_age_under_verification(self, age: int) -> AgeVerification | None:
        attribute = self._attributes.get(f"{constants.ATTR_AGE_UNDER}{age}")
        return AgeVerification.from_attribute(attribute) if attribute else None

    def __len__(self) -> int:
        return len(self._attributes)
