from .errors import (
    LOAD_ERRORS,
    ImageDecodeError,
    ImageLoadError,
    ImageNotFoundError,
    NetworkError,
    OfflineRequiredError,
    UnsafePathError,
    classify_load_error,
    load_error_guard,
)
from .loaders import HostImageLoader, HttpImageLoader, LocalImageLoader
from .paths import encode_path_segments, encode_url_path, prefix_path, site_path_to_file

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
    "LocalImageLoader",
    "HttpImageLoader",
    "HostImageLoader",
    "encode_path_segments",
    "encode_url_path",
    "prefix_path",
    "site_path_to_file",
]
