# folio/core/media/service.py
"""
Presentation-facing thumbnail service.

Flow per subject:
  1) resolve(subject) synchronously
  2) on NeedsProbe: cache.begin_resolution(key); only the first caller probes
  3) probe(candidates) → cache.complete(key, result)
  4) every render reads thumbnail_for(subject), which never blocks

Probes for different subjects run independently; within one subject the
candidates are tried strictly in order.
"""

from __future__ import annotations

import asyncio
import functools
from collections.abc import Iterable

from folio.core.load.loaders import HostImageLoader
from folio.core.media.base import ImageLoader, SubjectLike
from folio.core.media.cache import ResolutionCache, default_cache
from folio.core.media.probe import probe
from folio.core.media.resolver import resolve
from folio.diagnostics import get_logger
from folio.schemas.models import CacheKey, NeedsProbe, ProbePolicy, ResolvedThumbnail

_log = get_logger()


def fallback_chain(thumb: ResolvedThumbnail) -> list[str]:
    return [thumb.url, *thumb.fallbacks]


def next_fallback(thumb: ResolvedThumbnail, failed_url: str) -> str | None:
    """The URL to try after `failed_url` failed to load; None when the chain is exhausted."""
    chain = fallback_chain(thumb)
    try:
        idx = chain.index(failed_url)
    except ValueError:
        return None
    return chain[idx + 1] if idx + 1 < len(chain) else None


class ThumbnailService:
    def __init__(
        self,
        loader: ImageLoader | None = None,
        *,
        cache: ResolutionCache | None = None,
        policy: ProbePolicy | None = None,
    ) -> None:
        self.loader: ImageLoader = loader if loader is not None else HostImageLoader(policy)
        self.cache = cache if cache is not None else default_cache()
        self._inflight: dict[CacheKey, asyncio.Task[ResolvedThumbnail | None]] = {}

    def thumbnail_for(self, subject: SubjectLike) -> ResolvedThumbnail | None:
        """Best thumbnail known right now; None means render the placeholder."""
        res = resolve(subject)
        if isinstance(res, NeedsProbe):
            return self.cache.resolved(res.key)
        return res

    async def ensure(self, subject: SubjectLike) -> ResolvedThumbnail | None:
        """Resolve `subject`, probing its gallery folder once if needed."""
        res = resolve(subject)
        if not isinstance(res, NeedsProbe):
            return res

        if self.cache.begin_resolution(res.key):
            task = asyncio.get_running_loop().create_task(self._run(res))
            self._inflight[res.key] = task
            task.add_done_callback(functools.partial(self._probe_done, res.key))
            return await asyncio.shield(task)

        task = self._inflight.get(res.key)
        if task is not None and not task.done() and task.get_loop() is asyncio.get_running_loop():
            return await asyncio.shield(task)
        return self.cache.resolved(res.key)

    def schedule(self, subject: SubjectLike) -> asyncio.Task[ResolvedThumbnail | None]:
        """Fire-and-forget `ensure` on the running loop."""
        return asyncio.get_running_loop().create_task(self.ensure(subject))

    async def resolve_all(self, subjects: Iterable[SubjectLike]) -> list[ResolvedThumbnail | None]:
        return list(await asyncio.gather(*(self.ensure(s) for s in subjects)))

    async def _run(self, need: NeedsProbe) -> ResolvedThumbnail | None:
        url = await probe(need.candidates, self.loader)
        result = ResolvedThumbnail(url=url, alt=need.alt) if url is not None else None
        self.cache.complete(need.key, result)
        if result is None:
            _log.debug("no thumbnail found for %s", need.key)
        return result

    def _probe_done(self, key: CacheKey, task: asyncio.Task[ResolvedThumbnail | None]) -> None:
        self._inflight.pop(key, None)
        # cancelled (or crashed) before complete(): release the key for a later ensure
        if task.cancelled() or task.exception() is not None:
            if self.cache.abandon(key):
                _log.debug("probe for %s did not finish; key released", key)


__all__ = ["ThumbnailService", "fallback_chain", "next_fallback"]
