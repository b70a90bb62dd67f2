"""Extensions attached to a dynamic scenario."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from .. import constants
from ..request import omit_none
from ..validation import is_number

DEFAULT_RADIUS = 150
DEFAULT_MAX_UNCERTAINTY_RADIUS = 150


@dataclass(frozen=True)
class Extension:
    type: str
    content: Any = None

    def to_json(self) -> dict[str, Any]:
        return omit_none({"type": self.type, "content": self.content})


@dataclass(frozen=True)
class ExtensionBuilder:
    type: str | None = None
    content: Any = None

    def with_type(self, extension_type: str) -> ExtensionBuilder:
        return replace(self, type=extension_type)

    def with_content(self, content: Any) -> ExtensionBuilder:
        return replace(self, content=content)

    def build(self) -> Extension:
        if not self.type:
            raise ValueError("Extension type must be specified")
        return Extension(self.type, self.content)


@dataclass(frozen=True)
class LocationConstraintExtensionBuilder:
    """Restricts a share to devices within ``radius`` metres of a point."""
    latitude: float | None = None
    longitude: float | None = None
    radius: float = DEFAULT_RADIUS
    max_uncertainty_radius: float = DEFAULT_MAX_UNCERTAINTY_RADIUS

    def with_latitude(self, latitude: float) -> LocationConstraintExtensionBuilder:
        is_number(latitude, "latitude")
        return replace(self, latitude=latitude)

    def with_longitude(self, longitude: float) -> LocationConstraintExtensionBuilder:
        is_number(longitude, "longitude")
        return replace(self, longitude=longitude)

    def with_radius(self, radius: float) -> LocationConstraintExtensionBuilder:
        is_number(radius, "radius")
        return replace(self, radius=radius)

    def with_max_uncertainty(self, max_uncertainty_radius: float) -> LocationConstraintExtensionBuilder:
        is_number(max_uncertainty_radius, "max_uncertainty_radius")
        return replace(self, max_uncertainty_radius=max_uncertainty_radius)

    def build(self) -> Extension:
        if self.latitude is None or self.longitude is None:
            raise ValueError("latitude and longitude must be specified")
        return Extension(
            constants.LOCATION_CONSTRAINT,
            {
                "expected_device_location": {
                    "latitude": self.latitude,
                    "longitude": self.longitude,
                    "radius": self.radius,
                    "max_uncertainty_radius": self.max_uncertainty_radius,
                }
            },
        )


@dataclass(frozen=True)
class TransactionalFlowExtensionBuilder:
    content: Any = None

    def with_content(self, content: Any) -> TransactionalFlowExtensionBuilder:
        return replace(self, content=content)

    def build(self) -> Extension:
        if self.content is None:
            raise ValueError("Transactional flow content must be specified")
        return Extension(constants.TRANSACTIONAL_FLOW, self.content)
