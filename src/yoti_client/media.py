"""Binary media returned by the API, typed by mime type."""
from __future__ import annotations

import base64
from enum import Enum
from typing import Mapping

from . import constants
from .validation import is_string


class MediaKind(Enum):
    GENERIC = "generic"
    JPEG = "jpeg"
    PNG = "png"


def normalize_mime_type(content_type: str) -> str:
    """Strip parameters (``; charset=...``), trim and lowercase."""
    return content_type.split(";", 1)[0].strip().lower()


def classify_mime_type(content_type: str) -> MediaKind:
    mime_type = normalize_mime_type(content_type)
    if mime_type == constants.MIME_TYPE_JPEG:
        return MediaKind.JPEG
    if mime_type == constants.MIME_TYPE_PNG:
        return MediaKind.PNG
    return MediaKind.GENERIC


class Media:
    """Raw content with its mime type."""

    kind = MediaKind.GENERIC

    def __init__(self, content: bytes, mime_type: str):
        is_string(mime_type, "mimeType")
        self._content = bytes(content or b"")
        self._mime_type = mime_type

    @property
    def content(self) -> bytes:
        return self._content

    @property
    def mime_type(self) -> str:
        return self._mime_type

    def get_content(self) -> bytes:
        return self._content

    def get_mime_type(self) -> str:
        return self._mime_type

    def get_base64_content(self) -> str:
        """Content as a ``data:`` URI."""
        encoded = base64.b64encode(self._content).decode("ascii")
        return f"data:{self._mime_type};base64,{encoded}"

    def to_base64(self) -> str:
        return base64.b64encode(self._content).decode("ascii")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(mime_type={self._mime_type!r}, size={len(self._content)})"


class Image(Media):
    """Media known to be an image."""


class ImageJpeg(Image):
    kind = MediaKind.JPEG

    def __init__(self, content: bytes):
        super().__init__(content, constants.MIME_TYPE_JPEG)


class ImagePng(Image):
    kind = MediaKind.PNG

    def __init__(self, content: bytes):
        super().__init__(content, constants.MIME_TYPE_PNG)


def create_media(content: bytes, content_type: str | None) -> Media:
    """Build the Media variant matching ``content_type``.

    Raises:
        SchemaError: If ``content_type`` is not a string.
    """
    is_string(content_type, "mimeType")
    kind = classify_mime_type(content_type)
    if kind is MediaKind.JPEG:
        return ImageJpeg(content)
    if kind is MediaKind.PNG:
        return ImagePng(content)
    return Media(content, normalize_mime_type(content_type))


def media_from_headers(content: bytes, headers: Mapping[str, str]) -> Media:
    """Build Media from a response's headers, looking up Content-Type in any case."""
    content_type = None
    for name, value in headers.items():
        if name.lower() == "content-type":
            content_type = value
            break
    return create_media(content, content_type)
