# folio/__init__.py
"""
folio: thumbnail resolution for a static portfolio site.

Subpackages:
  - folio.schemas.models  media items, subjects, resolution outcomes, ProbePolicy
  - folio.core.media      resolver, existence probe, resolution cache, service, gallery manifest
  - folio.core.load       host image-load primitives (local files, HTTP) and their errors
  - folio.core.data       static JSON loader
"""

__version__ = "0.1.0"
