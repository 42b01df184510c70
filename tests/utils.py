# tests/utils.py
"""
Single source of truth for test data, factories, and canonical payloads.
Update values here to cascade across the test suite.
"""

from __future__ import annotations

import asyncio
import io
import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from PIL import Image

from folio.schemas.models import Subject

# -----------------------------
# Global defaults (edit once)
# -----------------------------

YOUTUBE_ID = "dQw4w9WgXcQ"
YOUTUBE_SHORT_URL = f"https://youtu.be/{YOUTUBE_ID}"
GALLERY_BASE = "Media/Proj X"
GALLERY_BASE_ENCODED = "Media/Proj%20X"

# -----------------------------
# Media / subject factories
# -----------------------------


def media(kind: str, src: str | None = None, alt: str = "", **extra: Any) -> dict[str, Any]:
    """A media item as it appears in the site JSON (`type`, not `kind`)."""
    item: dict[str, Any] = {"type": kind, "alt": alt or f"{kind} alt"}
    if src is not None:
        item["src"] = src
    item.update(extra)
    return item


def gallery(base_src: str | None = GALLERY_BASE, images: list[str] | None = None, alt: str = "gallery alt") -> dict[str, Any]:
    item: dict[str, Any] = {"type": "gallery", "alt": alt, "images": images or []}
    if base_src is not None:
        item["baseSrc"] = base_src
    return item


def make_subject(subject_id: int = 1, items: Iterable[dict[str, Any]] | None = None) -> Subject:
    return Subject(id=subject_id, media=list(items or []))


# -----------------------------
# Image helpers
# -----------------------------


def png_bytes(w: int = 32, h: int = 32, color: tuple[int, int, int] = (200, 80, 40)) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (w, h), color=color).save(buf, format="PNG")
    return buf.getvalue()


def write_image(path: Path, size: tuple[int, int] = (32, 32), fmt: str | None = None) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGB", size, color=(10, 120, 200)).save(path, format=fmt)
    return path


def write_json(path: Path, payload: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return path


# -----------------------------
# Fake image-load primitive
# -----------------------------


class RecordingLoader:
    """
    Async image-load primitive for tests.

    Succeeds for URLs in `ok`, raises the mapped exception for URLs in `raises`,
    fails otherwise. Every call is recorded in order.
    """

    def __init__(self, ok: Iterable[str] = (), *, raises: dict[str, BaseException] | None = None, delay: float = 0.0):
        self.ok = set(ok)
        self.raises = dict(raises or {})
        self.delay = delay
        self.calls: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def __call__(self, url: str) -> bool:
        self.calls.append(url)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            else:
                await asyncio.sleep(0)
            if url in self.raises:
                raise self.raises[url]
            return url in self.ok
        finally:
            self.in_flight -= 1
