# folio/core/media/probe.py
"""
Existence probe: walk an ordered candidate list and return the first URL that loads.

Candidates are attempted strictly one after another. A miss (False or any load
error) is normal control flow and only shows up in debug logs.
"""

from __future__ import annotations

from collections.abc import Iterable

from folio.core.load.errors import LOAD_ERRORS, load_error_guard
from folio.core.media.base import ImageLoader
from folio.diagnostics import get_logger

_log = get_logger()


async def probe(candidates: Iterable[str], loader: ImageLoader) -> str | None:
    """
    Args:
        candidates: Ordered candidate URLs; duplicates are attempted once.
        loader:     Host image-load primitive.

    Returns:
        The first candidate the loader accepts, or None when all of them miss.
    """
    attempted: set[str] = set()
    for url in candidates:
        if url in attempted:
            continue
        attempted.add(url)
        try:
            with load_error_guard():
                ok = await loader(url)
        except LOAD_ERRORS as exc:
            _log.debug("probe miss %s: %s", url, exc)
            continue
        if ok:
            _log.debug("probe hit %s after %d attempt(s)", url, len(attempted))
            return url
        _log.debug("probe miss %s", url)

    _log.debug("probe exhausted after %d candidate(s)", len(attempted))
    return None


__all__ = ["probe"]
