# folio/core/load/paths.py
"""
URL/path conventions of the static site.

Gallery folders in the data files are plain paths ("Media/Proj X"); the site may
be deployed under a base path ("/portfolio"). These helpers own the encoding and
prefixing so callers never pre-encode anything.
"""

from __future__ import annotations

from pathlib import Path
from urllib.parse import quote, unquote, urlparse, urlsplit, urlunsplit

from .errors import UnsafePathError

# Characters encodeURIComponent leaves alone
_URI_COMPONENT_SAFE = "-_.!~*'()"


def is_absolute_url(url: str) -> bool:
    return url.startswith("http")


def encode_path_segments(path: str) -> str:
    """Percent-encode each `/`-separated segment independently ("Proj X" → "Proj%20X")."""
    return "/".join(quote(segment, safe=_URI_COMPONENT_SAFE) for segment in path.split("/"))


def encode_url_path(url: str) -> str:
    """
    Like `encode_path_segments`, but for an absolute URL only the path is
    encoded; scheme, host, query and fragment are kept as written.
    """
    if not is_absolute_url(url):
        return encode_path_segments(url)
    parts = urlsplit(url)
    return urlunsplit(parts._replace(path=encode_path_segments(parts.path)))


def prefix_path(path: str, base_path: str = "") -> str:
    """
    Prefix a site-relative path with the deployment base path.

    Absolute URLs are returned untouched; otherwise exactly one `/` separates
    base and path.
    """
    if is_absolute_url(path):
        return path
    return f"{base_path}{'' if path.startswith('/') else '/'}{path}"


def strip_base_path(path: str, base_path: str) -> str:
    if base_path and (path == base_path or path.startswith(base_path + "/")):
        return path[len(base_path) :] or "/"
    return path


def site_path_to_file(url: str, public_dir: Path, base_path: str = "") -> Path:
    """
    Map a site-relative URL to a file under `public_dir`.

    Query strings and fragments are dropped, the base path is stripped, and the
    path is percent-decoded. Raises UnsafePathError if the result escapes
    `public_dir`.
    """
    path = unquote(urlparse(url).path)
    path = strip_base_path(path, base_path)
    root = public_dir.resolve()
    target = (root / path.lstrip("/")).resolve()
    if target != root and root not in target.parents:
        raise UnsafePathError(f"{url!r} resolves outside {root}")
    return target


__all__ = [
    "is_absolute_url",
    "encode_path_segments",
    "encode_url_path",
    "prefix_path",
    "strip_base_path",
    "site_path_to_file",
]
