# folio/core/media/resolver.py
"""
Pick a subject's representative thumbnail without any I/O.

Precedence (first match wins):
  1) no media                         → None
  2) any `thumbnail` item             → that item
  3) first item is `image`            → that item
  4) first item is `gallery`          → images[0], or NeedsProbe over the ranked folder candidates
  5) first item is a YouTube `video`  → img.youtube.com maxresdefault (+ smaller fallbacks)
  6) anything else                    → None

A malformed entry keeps its slot: as the first item it resolves to None, and a
valid `thumbnail` elsewhere still wins.
"""

from __future__ import annotations

from folio.core.media.base import SubjectLike
from folio.core.media.candidates import gallery_candidates
from folio.core.media.youtube import extract_video_id, is_youtube_url, thumbnail_chain
from folio.schemas.models import MediaItem, NeedsProbe, ResolvedThumbnail, coerce_media

Resolution = ResolvedThumbnail | NeedsProbe | None


def _from_src(item: MediaItem) -> ResolvedThumbnail | None:
    if not item.src:
        return None
    return ResolvedThumbnail(url=item.src, alt=item.alt)


def _from_gallery(subject_id: int, item: MediaItem) -> Resolution:
    if item.images:
        return ResolvedThumbnail(url=item.images[0], alt=item.alt)
    if not item.base_src:
        return None
    return NeedsProbe(
        key=(subject_id, item.base_src),
        alt=item.alt,
        candidates=tuple(gallery_candidates(item.base_src)),
    )


def _from_video(item: MediaItem) -> ResolvedThumbnail | None:
    if not item.src or not is_youtube_url(item.src):
        return None
    video_id = extract_video_id(item.src)
    if video_id is None:
        return None
    first, *rest = thumbnail_chain(video_id)
    return ResolvedThumbnail(url=first, alt=item.alt, fallbacks=tuple(rest))


def resolve(subject: SubjectLike) -> Resolution:
    media = coerce_media(getattr(subject, "media", None))
    if not media:
        return None

    explicit = next((m for m in media if m is not None and m.kind == "thumbnail"), None)
    if explicit is not None:
        return _from_src(explicit)

    first = media[0]
    if first is None:
        return None
    if first.kind == "image":
        return _from_src(first)
    if first.kind == "gallery":
        return _from_gallery(subject.id, first)
    if first.kind == "video":
        return _from_video(first)
    return None


__all__ = ["Resolution", "resolve"]
