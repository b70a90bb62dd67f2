"""Decryption of share receipts into :class:`ActivityDetails`."""
from __future__ import annotations

import base64
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from cryptography.hazmat.primitives.asymmetric import rsa

from ..crypto import decrypt_aes_cbc, unwrap_receipt_key
from ..errors import ActivityDetailsError
from ..validation import is_object, is_string
from .attribute import Attribute
from .profile import Profile
from .protobuf import AttributeList, EncryptedData

SUCCESS = "SUCCESS"


def decrypt_profile_content(
    content_b64: str | None, wrapped_key_b64: str, private_key: rsa.RSAPrivateKey
) -> Profile:
    """Decrypt ``other_party_profile_content`` into a Profile.

    An empty content string means the user shared no attributes.
    """
    if not content_b64:
        return Profile()

    key = unwrap_receipt_key(wrapped_key_b64, private_key)
    encrypted = EncryptedData.FromString(base64.b64decode(content_b64))
    plain = decrypt_aes_cbc(encrypted.cipher_text, encrypted.iv, key)
    attribute_list = AttributeList.FromString(plain)
    return Profile(Attribute.from_proto(a) for a in attribute_list.attributes)


def _parse_timestamp(value: str | None) -> datetime | None:
    if not value:
        return None
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


@dataclass(frozen=True)
class ActivityDetails:
    """Outcome of a completed share: receipt metadata plus the user's profile."""
    receipt_id: str | None
    remember_me_id: str | None
    parent_remember_me_id: str | None
    timestamp: datetime | None
    profile: Profile

    @classmethod
    def from_receipt(cls, receipt: Any, private_key: rsa.RSAPrivateKey) -> ActivityDetails:
        """Build ActivityDetails from the receipt hoisted off a profile response.

        Raises:
            SchemaError: If the receipt is missing or malformed.
            ActivityDetailsError: If the share was not successful.
        """
        is_object(receipt, "receipt")
        outcome = receipt.get("sharing_outcome")
        if outcome != SUCCESS:
            raise ActivityDetailsError(f"Sharing outcome was not successful: {outcome}", outcome)

        is_string(receipt.get("wrapped_receipt_key"), "wrapped_receipt_key")
        is_string(receipt.get("other_party_profile_content"), "other_party_profile_content", optional=True)

        profile = decrypt_profile_content(
            receipt.get("other_party_profile_content"),
            receipt["wrapped_receipt_key"],
            private_key,
        )
        return cls(
            receipt_id=receipt.get("receipt_id"),
            remember_me_id=receipt.get("remember_me_id"),
            parent_remember_me_id=receipt.get("parent_remember_me_id"),
            timestamp=_parse_timestamp(receipt.get("timestamp")),
            profile=profile,
        )

    def get_profile(self) -> Profile:
        return self.profile

    def get_remember_me_id(self) -> str | None:
        return self.remember_me_id

    def get_parent_remember_me_id(self) -> str | None:
        return self.parent_remember_me_id

    def get_receipt_id(self) -> str | None:
        return self.receipt_id

    def get_base64_selfie_uri(self) -> str | None:
        """Selfie as a ``data:`` URI, if one was shared."""
        selfie = self.profile.selfie
        if selfie is None or not hasattr(selfie.value, "get_base64_content"):
            return None
        return selfie.value.get_base64_content()
