# folio/schemas/models.py

from __future__ import annotations

import os
from collections.abc import Iterator
from enum import Enum
from pathlib import Path
from typing import Any, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from folio.diagnostics import get_logger

_log = get_logger()

# =========================
# Media items
# =========================

# Discriminator of a media entry in the site JSON (`"type"` on disk).
MediaKind = Literal["image", "thumbnail", "video", "gallery", "iframe", "blog", "pdf"]


class MediaItem(BaseModel):
    """
    One entry of a subject's `media` list.

    The on-disk JSON uses `type` for the discriminator; in Python it is `kind`.
    Kind-specific fields:
      - image / thumbnail / video / iframe / blog / pdf: `src`
      - gallery: `baseSrc` (folder path) and `images` (resolved paths, possibly empty)

    A gallery written before the manifest step stores its folder in `src`; it is
    moved to `baseSrc` here so downstream code only looks in one place.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    kind: MediaKind = Field(..., alias="type", description="Media discriminator (`type` in JSON).")
    src: str | None = Field(None, description="URL or site-relative path of the media.")
    alt: str = Field("", description="Alt text shown with the media.")
    title: str | None = Field(None, description="Optional caption/section title.")
    base_src: str | None = Field(None, alias="baseSrc", description="Gallery folder path (galleries only).")
    images: list[str] = Field(
        default_factory=list,
        description="Gallery image paths in display order. Non-empty means authoritative (no probing).",
    )

    @model_validator(mode="before")
    @classmethod
    def _gallery_folder_from_src(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        kind = data.get("type", data.get("kind"))
        has_base = bool(data.get("baseSrc") or data.get("base_src"))
        if kind == "gallery" and not has_base and isinstance(data.get("src"), str):
            data = {**data, "baseSrc": data["src"]}
        return data

    @field_validator("images", mode="before")
    @classmethod
    def _none_images(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("alt", mode="before")
    @classmethod
    def _none_alt(cls, v: Any) -> Any:
        return "" if v is None else v


def coerce_media(items: Any) -> list[MediaItem | None]:
    """
    Validate a loosely-typed media list, keeping positions.

    Entries that are already MediaItem pass through; dicts are validated; anything
    that fails validation (unknown kind, wrong field types) is logged and kept as
    a None placeholder, so `media[0]` still means the first entry on disk.
    """
    if not items:
        return []
    out: list[MediaItem | None] = []
    for raw in items:
        if raw is None or isinstance(raw, MediaItem):
            out.append(raw)
            continue
        try:
            out.append(MediaItem.model_validate(raw))
        except ValidationError as exc:
            _log.warning("malformed media item %r (%d errors)", raw, exc.error_count())
            out.append(None)
    return out


# =========================
# Subjects
# =========================


class Subject(BaseModel):
    """Any portfolio entity that owns a media list: `{id, media}`."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: int = Field(..., description="Unique within its collection.")
    media: list[MediaItem | None] = Field(
        default_factory=list,
        description="Order-significant media list; malformed entries are None placeholders.",
    )

    @field_validator("media", mode="before")
    @classmethod
    def _lenient_media(cls, v: Any) -> list[MediaItem | None]:
        return coerce_media(v)


class Project(Subject):
    title: str = ""
    tagline: str = ""
    description: str = ""
    technologies: list[str] = Field(default_factory=list)
    category: str = ""
    status: str = ""
    demo_url: str | None = Field(None, alias="demoUrl")
    source_code_url: str | None = Field(None, alias="sourceCodeUrl")
    featured: bool = False
    awards: list[str] = Field(default_factory=list)


class ExperienceEntry(Subject):
    company: str = ""
    position: str = ""
    location: str = ""
    duration: str = ""
    type: str = ""
    description: str = ""
    responsibilities: list[str] = Field(default_factory=list)
    achievements: list[str] = Field(default_factory=list)
    technologies: list[str] = Field(default_factory=list)
    current: bool = False


class Achievement(Subject):
    title: str = ""
    description: str = ""
    date: str = ""
    category: str = ""
    organization: str = ""
    impact: str | None = None
    link: str | None = None
    featured: bool = False
    project: str | None = None


class Leadership(Subject):
    role: str = ""
    organization: str = ""
    description: str = ""
    duration: str = ""


class Volunteering(Subject):
    activity: str = ""
    description: str = ""
    impact: str = ""
    type: str = ""


class Publication(Subject):
    title: str = ""
    authors: list[str] = Field(default_factory=list)
    journal: str = ""
    year: int | None = None
    type: str = ""
    status: str = ""
    doi: str | None = None
    url: str | None = None
    abstract: str = ""
    keywords: list[str] = Field(default_factory=list)
    citations: int = 0


class Patent(Subject):
    title: str = ""
    inventors: list[str] = Field(default_factory=list)
    patent_number: str | None = Field(None, alias="patentNumber")
    application_number: str = Field("", alias="applicationNumber")
    filing_date: str = Field("", alias="filingDate")
    publication_date: str | None = Field(None, alias="publicationDate")
    status: str = ""
    assignee: str = ""
    abstract: str = ""
    claims: int = 0
    url: str | None = None


class Contribution(Subject):
    name: str = ""
    description: str = ""
    type: str = ""
    role: str = ""
    technologies: list[str] = Field(default_factory=list)
    repository: str = ""
    homepage: str | None = None
    stars: int = 0
    forks: int = 0
    license: str = ""
    status: str = ""
    impact: str = ""
    featured: bool = False


class Portfolio(BaseModel):
    """All subject collections loaded from the static data directory."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    projects: list[Project] = Field(default_factory=list)
    experiences: list[ExperienceEntry] = Field(default_factory=list)
    achievements: list[Achievement] = Field(default_factory=list)
    leadership: list[Leadership] = Field(default_factory=list)
    volunteering: list[Volunteering] = Field(default_factory=list)
    publications: list[Publication] = Field(default_factory=list)
    patents: list[Patent] = Field(default_factory=list)
    contributions: list[Contribution] = Field(default_factory=list)

    def iter_subjects(self) -> Iterator[tuple[str, Subject]]:
        for name in type(self).model_fields:
            for subject in getattr(self, name):
                yield name, subject


# =========================
# Resolution outcomes
# =========================

# (subject id, media source key); the source key is the gallery's folder path.
CacheKey: TypeAlias = tuple[int, str]


class ResolvedThumbnail(BaseModel):
    """
    The representative image of a subject.

    `fallbacks` holds the ordered remainder of a fixed fallback chain (YouTube
    thumbnail sizes) for the presentation layer to walk on load errors; it is
    empty for every other source.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    url: str
    alt: str = ""
    fallbacks: tuple[str, ...] = ()


class NeedsProbe(BaseModel):
    """Resolver verdict when the thumbnail can only be found by probing candidate URLs."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    key: CacheKey
    alt: str = ""
    candidates: tuple[str, ...]


class CacheState(Enum):
    PENDING = "pending"
    ATTEMPTED_EMPTY = "attempted_empty"


CacheEntry: TypeAlias = ResolvedThumbnail | CacheState


# =========================
# Probe policy
# =========================


def _env_public_dir() -> Path:
    return Path(os.getenv("FOLIO_PUBLIC_DIR", "public"))


def _env_base_path() -> str:
    return os.getenv("FOLIO_BASE_PATH", "")


class ProbePolicy(BaseModel):
    """
    How the host image-load primitives behave (offline-first).

    Site-relative candidates are checked against `public_dir` on disk; absolute
    http(s) candidates are only requested when `allow_network` is on.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True, extra="ignore")

    allow_network: bool = Field(
        False,
        description="If False, every http(s) candidate fails without a request.",
    )
    timeout_s: float = Field(
        10.0,
        gt=0,
        description="HTTP timeout in seconds per candidate.",
    )
    user_agent: str = Field(
        "folio-thumbs/0.1 (+thumbnail-probe)",
        description="User-Agent string used in HTTP requests.",
    )
    public_dir: Path = Field(
        default_factory=_env_public_dir,
        description="Static site root used to resolve site-relative URLs (env FOLIO_PUBLIC_DIR).",
    )
    base_path: str = Field(
        default_factory=_env_base_path,
        validate_default=True,
        description="Deployment prefix the site is served under, e.g. '/portfolio' (env FOLIO_BASE_PATH).",
    )
    verify_decode: bool = Field(
        True,
        description="If True, decode the bytes with Pillow before reporting success.",
    )
    min_bytes: int = Field(
        1,
        ge=0,
        description="Bodies/files smaller than this many bytes count as missing.",
    )

    @field_validator("base_path")
    @classmethod
    def _normalize_base_path(cls, v: str) -> str:
        v = (v or "").strip().strip("/")
        return f"/{v}" if v else ""


__all__ = [
    "MediaKind",
    "MediaItem",
    "coerce_media",
    "Subject",
    "Project",
    "ExperienceEntry",
    "Achievement",
    "Leadership",
    "Volunteering",
    "Publication",
    "Patent",
    "Contribution",
    "Portfolio",
    "CacheKey",
    "ResolvedThumbnail",
    "NeedsProbe",
    "CacheState",
    "CacheEntry",
    "ProbePolicy",
]
