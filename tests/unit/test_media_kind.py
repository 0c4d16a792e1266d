from __future__ import annotations

import pytest

from storefront_admin.domain.catalog.media import MediaKind, classify_media


@pytest.mark.parametrize(
    ("media", "expected"),
    [
        (None, MediaKind.NONE),
        ("", MediaKind.NONE),
        ("   ", MediaKind.NONE),
        ("/uploads/clip.mp4", MediaKind.VIDEO),
        ("https://cdn.example.org/clip.MOV", MediaKind.VIDEO),
        ("https://cdn.example.org/clip.webm?v=2", MediaKind.VIDEO),
        ("/uploads/photo.jpg", MediaKind.IMAGE),
        ("https://cdn.example.org/animation.gif", MediaKind.IMAGE),
    ],
)
def test_classify_media(media: str | None, expected: MediaKind) -> None:
    assert classify_media(media) is expected
