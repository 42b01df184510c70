# folio/core/load/errors.py
"""
Typed errors + utilities for the host image-load primitives.

A failed load is routine: the existence probe treats every error below as
"this candidate is not there" and moves on to the next one.

Exports
-------
- ImageLoadError, OfflineRequiredError, ImageNotFoundError,
  NetworkError, ImageDecodeError, UnsafePathError
- LOAD_ERRORS
- classify_load_error(exc)
- load_error_guard()
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

# =========================
# Exception types
# =========================


class ImageLoadError(RuntimeError):
    """Base class for image-load failures."""


class OfflineRequiredError(ImageLoadError):
    """Candidate needs the network but policy forbids network access."""


class ImageNotFoundError(ImageLoadError):
    """Nothing at the URL (HTTP 4xx/5xx or missing file)."""


class NetworkError(ImageLoadError):
    """HTTP/transport failure while requesting a candidate."""


class ImageDecodeError(ImageLoadError):
    """Something is there but it is not a decodable image."""


class UnsafePathError(ImageLoadError):
    """A site-relative candidate resolves outside the public directory."""


# Selector tuple for grouped exception handling; every subclass is covered by the base
LOAD_ERRORS: tuple[type[ImageLoadError], ...] = (ImageLoadError,)

# =========================
# Classification helpers
# =========================


def classify_load_error(exc: BaseException) -> ImageLoadError:
    """
    Map arbitrary exceptions raised inside a loader to a typed ImageLoadError.

    Heuristics:
      - ImageLoadError subclasses → passed through
      - requests.HTTPError → ImageNotFoundError
      - other requests.* errors → NetworkError
      - FileNotFoundError / IsADirectoryError → ImageNotFoundError
      - Pillow UnidentifiedImageError, SyntaxError/ValueError from decoders → ImageDecodeError
      - other OSError → NetworkError when it came from a socket, else ImageNotFoundError
      - Fallback → ImageLoadError
    """
    if isinstance(exc, ImageLoadError):
        return exc

    msg = f"{type(exc).__name__}: {exc}"

    import requests

    if isinstance(exc, requests.HTTPError):
        return ImageNotFoundError(msg)
    if isinstance(exc, requests.RequestException):
        return NetworkError(msg)

    from PIL import UnidentifiedImageError

    if isinstance(exc, UnidentifiedImageError):
        return ImageDecodeError(msg)
    if isinstance(exc, (FileNotFoundError, IsADirectoryError, NotADirectoryError)):
        return ImageNotFoundError(msg)
    if isinstance(exc, (ConnectionError, TimeoutError)):
        return NetworkError(msg)
    if isinstance(exc, OSError):
        # Pillow raises plain OSError for truncated/corrupt files
        if "image" in msg.lower() or "truncated" in msg.lower():
            return ImageDecodeError(msg)
        return ImageNotFoundError(msg)
    if isinstance(exc, (SyntaxError, ValueError)):
        return ImageDecodeError(msg)

    return ImageLoadError(msg)


@contextmanager
def load_error_guard() -> Iterator[None]:
    """Context manager to normalize unexpected exceptions from loader internals."""
    try:
        yield
    except LOAD_ERRORS:
        raise
    except Exception as exc:  # noqa: BLE001
        raise classify_load_error(exc) from exc


__all__ = [
    "ImageLoadError",
    "OfflineRequiredError",
    "ImageNotFoundError",
    "NetworkError",
    "ImageDecodeError",
    "UnsafePathError",
    "LOAD_ERRORS",
    "classify_load_error",
    "load_error_guard",
]
