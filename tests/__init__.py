"""
Expose common test utilities so tests can import directly:
    from tests import make_subject, media, gallery
"""

from .utils import gallery, make_subject, media

__all__ = ["make_subject", "media", "gallery"]
