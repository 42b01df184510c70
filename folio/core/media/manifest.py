# folio/core/media/manifest.py
"""
Build-time gallery manifest.

Rewrites the gallery items of a data file so `images` lists the files actually
present in the folder. The resolver then takes the fast path (images[0]) and
never needs to probe those galleries at runtime.
"""

from __future__ import annotations

import json
import posixpath
import re
from pathlib import Path
from typing import Any

from folio.diagnostics import get_logger

_log = get_logger()

_IMAGE_FILE = re.compile(r"\.(jpg|jpeg|png|webp|gif|svg)$", re.IGNORECASE)
_FIRST_NUMBER = re.compile(r"(\d+)")

DEFAULT_DATA_FILES: tuple[str, ...] = ("data/projects.json", "data/achievements.json")


def _number_key(path: str) -> int:
    m = _FIRST_NUMBER.search(posixpath.basename(path))
    return int(m.group(1)) if m else 0


def list_gallery_images(folder: str, public_dir: Path) -> list[str]:
    """
    Image files in `public_dir/folder`, as site paths under `folder`, sorted by
    the first number in the file name (1.png, 2.png, 10.png). Unreadable folders
    give an empty list.
    """
    full = public_dir / folder.lstrip("/")
    try:
        names = sorted(p.name for p in full.iterdir() if p.is_file())
    except OSError as exc:
        _log.warning("could not read gallery folder %s: %s", folder, exc)
        return []
    paths = [posixpath.join(folder, name) for name in names if _IMAGE_FILE.search(name)]
    # sort is stable, so names without a number keep their alphabetical order
    paths.sort(key=_number_key)
    return paths


def _gallery_folder(item: dict[str, Any]) -> str | None:
    folder = item.get("baseSrc") or item.get("src")
    return folder if isinstance(folder, str) and folder else None


def generate_manifest(data_file: Path, public_dir: Path, key: str | None = None) -> int:
    """
    Populate every gallery in `data_file[key]` in place.

    Args:
        data_file:  JSON file with a top-level list of subjects under `key`.
        public_dir: Static root the gallery folders are relative to.
        key:        Top-level key; defaults to the file stem ("projects", "achievements").

    Returns:
        Number of gallery items rewritten.
    """
    key = key or data_file.stem
    data = json.loads(data_file.read_text(encoding="utf-8"))
    subjects = data.get(key) if isinstance(data, dict) else None
    if not isinstance(subjects, list):
        _log.warning("no top-level list %r in %s, skipping", key, data_file)
        return 0

    count = 0
    for subject in subjects:
        media = subject.get("media") if isinstance(subject, dict) else None
        if not isinstance(media, list):
            continue
        for i, item in enumerate(media):
            if not isinstance(item, dict) or item.get("type") != "gallery":
                continue
            folder = _gallery_folder(item)
            if folder is None:
                continue
            images = list_gallery_images(folder, public_dir)
            rewritten: dict[str, Any] = {"type": "gallery", "alt": item.get("alt", "")}
            if item.get("title"):
                rewritten["title"] = item["title"]
            rewritten["baseSrc"] = folder
            rewritten["images"] = images
            media[i] = rewritten
            count += 1
            _log.info("gallery %r for %r: %d image(s)", folder, subject.get("title", subject.get("id")), len(images))

    data_file.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    return count


__all__ = ["DEFAULT_DATA_FILES", "list_gallery_images", "generate_manifest"]
