# folio/core/media/base.py
"""
Cross-layer contracts for thumbnail resolution.

This module defines:
- `SubjectLike` Protocol: the narrow structural shape the resolver needs from a
  portfolio entity (`id` plus an optional `media` list).
- `ImageLoader` Protocol: the host environment's image-load primitive that the
  existence probe calls once per candidate URL.

Concrete loaders live in `folio.core.load.loaders`; tests pass plain async
callables.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SubjectLike(Protocol):
    """Anything with an integer `id` and a (possibly None) media sequence."""

    id: int
    media: Sequence[Any] | None


@runtime_checkable
class ImageLoader(Protocol):
    """
    Protocol for the image-load primitive.

    Implementations report whether `url` points at a loadable image. They may
    return False or raise an `ImageLoadError`; the probe treats both as a routine
    miss. A loader must be reusable across calls with different URLs and keep no
    per-call state between them.
    """

    async def __call__(self, url: str) -> bool:
        """
        Args:
            url: Candidate URL, already percent-encoded (absolute http(s) or site-relative).

        Returns:
            True if the URL resolves to a decodable image.
        """
        ...


__all__ = [
    "SubjectLike",
    "ImageLoader",
]
