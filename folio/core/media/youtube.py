# folio/core/media/youtube.py
"""YouTube video-id extraction and the fixed thumbnail fallback chain."""

from __future__ import annotations

import re

# watch?v=, youtu.be/, /embed/, /v/ (and /e/, /user/.../) forms; 11-char id
_YOUTUBE_ID = re.compile(r"(?:youtube\.com/(?:[^/]+/.+/|(?:v|e(?:mbed)?)/|.*[?&]v=)|youtu\.be/)([^\"&?/\s]{11})")

_THUMB_HOST = "https://img.youtube.com/vi"

# Largest first; each miss advances exactly one step.
THUMBNAIL_SIZES: tuple[str, ...] = ("maxresdefault", "hqdefault", "mqdefault", "default")

_THUMB_URL = re.compile(r"img\.youtube\.com/vi/([^/]+)/(" + "|".join(THUMBNAIL_SIZES) + r")\.jpg")


def is_youtube_url(url: str) -> bool:
    return "youtube.com" in url or "youtu.be" in url


def extract_video_id(url: str) -> str | None:
    m = _YOUTUBE_ID.search(url)
    return m.group(1) if m else None


def thumbnail_url(video_id: str, size: str = THUMBNAIL_SIZES[0]) -> str:
    return f"{_THUMB_HOST}/{video_id}/{size}.jpg"


def thumbnail_chain(video_id: str) -> list[str]:
    return [thumbnail_url(video_id, size) for size in THUMBNAIL_SIZES]


def next_youtube_fallback(url: str) -> str | None:
    """
    The next thumbnail to try after `url` failed to load.

    Returns None once `default.jpg` has failed, or if `url` is not a YouTube
    thumbnail URL at all.
    """
    m = _THUMB_URL.search(url)
    if not m:
        return None
    video_id, size = m.group(1), m.group(2)
    idx = THUMBNAIL_SIZES.index(size)
    if idx + 1 >= len(THUMBNAIL_SIZES):
        return None
    return thumbnail_url(video_id, THUMBNAIL_SIZES[idx + 1])
