# folio/core/load/loaders.py
"""
Host image-load primitives.

Each loader exposes a blocking `check(url)` that raises an ImageLoadError on a
miss, and an awaitable `__call__(url) -> bool` (the `ImageLoader` protocol) that
runs `check` in a worker thread and turns misses into False.

- LocalImageLoader: site-relative URLs → files under `policy.public_dir`
- HttpImageLoader:  absolute http(s) URLs via requests (only if `policy.allow_network`)
- HostImageLoader:  routes between the two
"""

from __future__ import annotations

import asyncio
import io

import requests
from PIL import Image

from folio.diagnostics import get_logger
from folio.schemas.models import ProbePolicy

from .errors import (
    LOAD_ERRORS,
    ImageDecodeError,
    ImageNotFoundError,
    OfflineRequiredError,
    load_error_guard,
)
from .paths import is_absolute_url, site_path_to_file

_log = get_logger()

_STREAM_CHUNK = 64 * 1024
_MAX_BODY = 32 * 1024 * 1024  # 32 MiB


def _verify_image(fp: io.BytesIO | str) -> None:
    # verify() checks integrity without decoding the full raster
    with Image.open(fp) as im:
        im.verify()


class _Loader:
    def __init__(self, policy: ProbePolicy | None = None) -> None:
        self.policy = policy or ProbePolicy()

    def check(self, url: str) -> None:  # pragma: no cover - abstract
        raise NotImplementedError

    async def __call__(self, url: str) -> bool:
        try:
            await asyncio.to_thread(self.check, url)
        except LOAD_ERRORS as exc:
            _log.debug("load miss %s: %s", url, exc)
            return False
        return True


class LocalImageLoader(_Loader):
    """Checks site-relative URLs against the static public directory."""

    def check(self, url: str) -> None:
        pol = self.policy
        with load_error_guard():
            path = site_path_to_file(url, pol.public_dir, pol.base_path)
            if not path.is_file():
                raise ImageNotFoundError(f"no file for {url} ({path})")
            if path.stat().st_size < pol.min_bytes:
                raise ImageNotFoundError(f"empty file for {url}")
            if pol.verify_decode:
                _verify_image(str(path))


class HttpImageLoader(_Loader):
    """Requests an absolute URL and checks the body is an image."""

    def check(self, url: str) -> None:
        pol = self.policy
        if not pol.allow_network:
            raise OfflineRequiredError(f"network disabled by policy: {url}")

        with load_error_guard():
            resp = requests.get(
                url,
                headers={"User-Agent": pol.user_agent, "Accept": "image/*"},
                timeout=pol.timeout_s,
                stream=True,
            )
            try:
                if resp.status_code >= 400:
                    raise ImageNotFoundError(f"HTTP {resp.status_code} for {url}")

                content_type = resp.headers.get("Content-Type")
                if content_type and not content_type.split(";", 1)[0].strip().lower().startswith("image/"):
                    raise ImageDecodeError(f"not an image ({content_type}) at {url}")

                buf = io.BytesIO()
                for chunk in resp.iter_content(chunk_size=_STREAM_CHUNK):
                    if chunk:
                        buf.write(chunk)
                    if buf.tell() > _MAX_BODY:
                        raise ImageDecodeError(f"body over {_MAX_BODY} bytes at {url}")
            finally:
                resp.close()

            if buf.tell() < pol.min_bytes:
                raise ImageDecodeError(f"empty body at {url}")
            if pol.verify_decode:
                buf.seek(0)
                _verify_image(buf)


class HostImageLoader(_Loader):
    """Routes absolute URLs to HTTP and everything else to the public directory."""

    def __init__(self, policy: ProbePolicy | None = None) -> None:
        super().__init__(policy)
        self.local = LocalImageLoader(self.policy)
        self.http = HttpImageLoader(self.policy)

    def check(self, url: str) -> None:
        if is_absolute_url(url):
            self.http.check(url)
        else:
            self.local.check(url)


__all__ = [
    "LocalImageLoader",
    "HttpImageLoader",
    "HostImageLoader",
]
