# tests/conftest.py
from __future__ import annotations

from pathlib import Path

import pytest

from folio.core.media.cache import ResolutionCache
from folio.schemas.models import ProbePolicy
from tests.utils import RecordingLoader, png_bytes as _make_png, write_image


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    # policy defaults read these; keep tests independent of the caller's shell
    monkeypatch.delenv("FOLIO_BASE_PATH", raising=False)
    monkeypatch.delenv("FOLIO_PUBLIC_DIR", raising=False)
    monkeypatch.delenv("FOLIO_DEBUG", raising=False)
    yield


@pytest.fixture
def cache() -> ResolutionCache:
    return ResolutionCache()


@pytest.fixture
def recording_loader():
    """
    Factory for RecordingLoader.
    Usage:
        loader = recording_loader(ok={"a/1.png"})
    """

    def _factory(ok=(), **kwargs) -> RecordingLoader:
        return RecordingLoader(ok, **kwargs)

    return _factory


@pytest.fixture
def public_dir(tmp_path: Path) -> Path:
    """Empty static root for local-loader and manifest tests."""
    root = tmp_path / "public"
    root.mkdir(parents=True, exist_ok=True)
    return root


@pytest.fixture
def local_policy(public_dir: Path):
    """Factory for an offline ProbePolicy rooted at `public_dir`."""

    def _factory(**overrides) -> ProbePolicy:
        return ProbePolicy(public_dir=public_dir, **overrides)

    return _factory


@pytest.fixture
def png_bytes():
    """
    Fixture that returns a callable to generate PNG bytes.
    Usage:
        data = png_bytes(64, 64)
    """
    return _make_png


@pytest.fixture
def make_image():
    """
    Fixture that returns a callable to write an image file.
    Usage:
        make_image(path, (w, h))
    """
    return write_image


# -------- Pytest markers --------
def pytest_configure(config):
    config.addinivalue_line("markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')")
    config.addinivalue_line("markers", "integration: marks integration tests")
