# folio/core/media/candidates.py
"""
Ranked thumbnail filenames for a gallery folder whose image list is unknown.

Order is part of the contract: names first, then extensions, e.g.
`B/1.jpg, B/1.jpeg, B/1.png, B/1.webp, B/screenshot.jpg, ...`.
"""

from __future__ import annotations

from folio.core.load.paths import encode_url_path

GALLERY_THUMB_NAMES: tuple[str, ...] = ("1", "screenshot", "demo", "main", "hero")
GALLERY_THUMB_EXTS: tuple[str, ...] = ("jpg", "jpeg", "png", "webp")


def gallery_candidates(base_src: str) -> list[str]:
    """
    Candidate URLs for gallery folder `base_src`, each path segment percent-encoded.
    An absolute http(s) `base_src` keeps its scheme and host; only the path is encoded.
    """
    base = encode_url_path(base_src.rstrip("/"))
    return [f"{base}/{name}.{ext}" for name in GALLERY_THUMB_NAMES for ext in GALLERY_THUMB_EXTS]
