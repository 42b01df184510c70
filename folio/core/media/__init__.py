from .cache import ResolutionCache, default_cache
from .candidates import gallery_candidates
from .probe import probe
from .resolver import Resolution, resolve
from .service import ThumbnailService, fallback_chain, next_fallback
from .youtube import extract_video_id, next_youtube_fallback

__all__ = [
    "resolve",
    "Resolution",
    "gallery_candidates",
    "extract_video_id",
    "next_youtube_fallback",
    "probe",
    "ResolutionCache",
    "default_cache",
    "ThumbnailService",
    "fallback_chain",
    "next_fallback",
]
