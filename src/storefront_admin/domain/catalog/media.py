"""Classification of product media URLs for storefront rendering."""

from __future__ import annotations

from enum import StrEnum
from urllib.parse import urlparse

_VIDEO_EXTENSIONS = (".mp4", ".mov", ".webm")


class MediaKind(StrEnum):
    """Supported media presentations for one product."""

    NONE = "none"
    IMAGE = "image"
    VIDEO = "video"


def classify_media(media: str | None) -> MediaKind:
    """Infer whether a media URL should render as video, image, or nothing."""

    if media is None or not media.strip():
        return MediaKind.NONE
    path = urlparse(media.strip()).path.lower()
    if path.endswith(_VIDEO_EXTENSIONS):
        return MediaKind.VIDEO
    return MediaKind.IMAGE
