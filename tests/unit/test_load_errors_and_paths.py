# tests/unit/test_load_errors_and_paths.py
from __future__ import annotations

from pathlib import Path

import pytest
import requests
from PIL import UnidentifiedImageError

from folio.core.load.errors import (
    LOAD_ERRORS,
    ImageDecodeError,
    ImageLoadError,
    ImageNotFoundError,
    NetworkError,
    UnsafePathError,
    classify_load_error,
    load_error_guard,
)
from folio.core.load.paths import prefix_path, site_path_to_file, strip_base_path


@pytest.mark.parametrize(
    "exc, expected",
    [
        (requests.HTTPError("404"), ImageNotFoundError),
        (requests.ConnectionError("refused"), NetworkError),
        (requests.Timeout("slow"), NetworkError),
        (UnidentifiedImageError("cannot identify image file"), ImageDecodeError),
        (FileNotFoundError("gone"), ImageNotFoundError),
        (OSError("image file is truncated"), ImageDecodeError),
        (SyntaxError("broken PNG file"), ImageDecodeError),
        (RuntimeError("??"), ImageLoadError),
    ],
)
def test_classify_load_error(exc: Exception, expected: type[ImageLoadError]) -> None:
    out = classify_load_error(exc)
    assert type(out) is expected


def test_classify_passes_through_typed_errors() -> None:
    e = UnsafePathError("x")
    assert classify_load_error(e) is e


def test_guard_wraps_and_chains() -> None:
    with pytest.raises(NetworkError) as info:
        with load_error_guard():
            raise requests.ConnectionError("down")
    assert isinstance(info.value.__cause__, requests.ConnectionError)


def test_prefix_path() -> None:
    assert prefix_path("img/a.png", "/portfolio") == "/portfolio/img/a.png"
    assert prefix_path("/img/a.png", "/portfolio") == "/portfolio/img/a.png"
    assert prefix_path("https://cdn/a.png", "/portfolio") == "https://cdn/a.png"
    assert prefix_path("img/a.png") == "/img/a.png"


def test_strip_base_path_only_whole_segments() -> None:
    assert strip_base_path("/portfolio/img/a.png", "/portfolio") == "/img/a.png"
    assert strip_base_path("/portfolio-old/a.png", "/portfolio") == "/portfolio-old/a.png"
    assert strip_base_path("/img/a.png", "") == "/img/a.png"


def test_site_path_to_file_decodes_and_drops_query(tmp_path: Path) -> None:
    out = site_path_to_file("/Media/Proj%20X/1.png?v=2#top", tmp_path)
    assert out == (tmp_path / "Media" / "Proj X" / "1.png").resolve()


@pytest.mark.parametrize("exc_type", [ImageLoadError, ImageNotFoundError, NetworkError, ImageDecodeError, UnsafePathError])
def test_load_errors_selector_covers_taxonomy(exc_type: type[ImageLoadError]) -> None:
    assert issubclass(exc_type, LOAD_ERRORS)
    assert isinstance(classify_load_error(RuntimeError("??")), LOAD_ERRORS)
