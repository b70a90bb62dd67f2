"""Profile attributes and their value conversion."""
from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import date
from typing import Any

from .. import constants
from ..media import ImageJpeg, ImagePng
from .protobuf import ContentType


def convert_value(content_type: int, value: bytes) -> Any:
    """Convert raw attribute bytes according to their content type.

    Unknown and multi-value content is returned as bytes.
    """
    if content_type == ContentType.STRING:
        return value.decode("utf-8")
    if content_type == ContentType.JPEG:
        return ImageJpeg(value)
    if content_type == ContentType.PNG:
        return ImagePng(value)
    if content_type == ContentType.DATE:
        return date.fromisoformat(value.decode("utf-8"))
    if content_type == ContentType.JSON:
        return json.loads(value.decode("utf-8"))
    if content_type == ContentType.INT:
        return int(value.decode("utf-8"))
    return value


@dataclass(frozen=True)
class Attribute:
    name: str
    value: Any
    content_type: int = ContentType.UNDEFINED

    @classmethod
    def from_proto(cls, proto) -> Attribute:
        return cls(
            name=proto.name,
            value=convert_value(proto.content_type, proto.value),
            content_type=proto.content_type,
        )

    def get_name(self) -> str:
        return self.name

    def get_value(self) -> Any:
        return self.value


@dataclass(frozen=True)
class AgeVerification:
    """An ``age_over:N`` / ``age_under:N`` derived attribute."""
    attribute: Attribute
    check_type: str
    age: int
    result: bool

    @classmethod
    def from_attribute(cls, attribute: Attribute) -> AgeVerification:
        check, _, age = attribute.name.partition(":")
        if not age.isdigit():
            raise ValueError(f"Invalid age verification attribute: {attribute.name}")
        return cls(
            attribute=attribute,
            check_type=check,
            age=int(age),
            result=str(attribute.value).lower() == "true",
        )

    def get_attribute(self) -> Attribute:
        return self.attribute


def is_age_verification(name: str) -> bool:
    return name.startswith((constants.ATTR_AGE_OVER, constants.ATTR_AGE_UNDER))
