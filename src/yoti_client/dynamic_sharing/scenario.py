"""Dynamic scenario and the share URL created from it."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from ..validation import is_string
from .extensions import Extension
from .policy import DynamicPolicy


@dataclass(frozen=True)
class DynamicScenario:
    callback_endpoint: str
    policy: DynamicPolicy
    extensions: tuple[Extension, ...] = ()

    def to_json(self) -> dict[str, Any]:
        return {
            "callback_endpoint": self.callback_endpoint,
            "policy": self.policy,
            "extensions": list(self.extensions),
        }


@dataclass(frozen=True)
class DynamicScenarioBuilder:
    callback_endpoint: str | None = None
    policy: DynamicPolicy | None = None
    extensions: tuple[Extension, ...] = ()

    def with_callback_endpoint(self, callback_endpoint: str) -> DynamicScenarioBuilder:
        return replace(self, callback_endpoint=callback_endpoint)

    def with_policy(self, policy: DynamicPolicy) -> DynamicScenarioBuilder:
        return replace(self, policy=policy)

    def with_extension(self, extension: Extension) -> DynamicScenarioBuilder:
        return replace(self, extensions=self.extensions + (extension,))

    def build(self) -> DynamicScenario:
        if not self.callback_endpoint:
            raise ValueError("callback_endpoint must be specified")
        if self.policy is None:
            raise ValueError("policy must be specified")
        return DynamicScenario(self.callback_endpoint, self.policy, self.extensions)


@dataclass(frozen=True)
class ShareUrlResult:
    """Result of creating a share URL for a dynamic scenario."""
    share_url: str
    ref_id: str

    @classmethod
    def from_json(cls, raw: Any) -> ShareUrlResult:
        raw = raw if isinstance(raw, dict) else {}
        is_string(raw.get("qrcode"), "qrcode")
        is_string(raw.get("ref_id"), "ref_id")
        return cls(share_url=raw["qrcode"], ref_id=raw["ref_id"])

    def get_share_url(self) -> str:
        return self.share_url

    def get_ref_id(self) -> str:
        return self.ref_id
