"""Profiles decrypted from Connect share receipts."""
from .activity_details import ActivityDetails, decrypt_profile_content
from .attribute import AgeVerification, Attribute, convert_value
from .profile import Profile
from .protobuf import ContentType

__all__ = [
    "ActivityDetails",
    "AgeVerification",
    "Attribute",
    "ContentType",
    "Profile",
    "convert_value",
    "decrypt_profile_content",
]
