"""
Pydantic schema definitions for the catalog module.

The ``Title`` model is the single show entry handed out by the
catalogue. It is frozen: the catalogue's own records are shared between
requests, so enrichment always produces a copy with ``artwork_id``
filled in rather than touching the stored record. ``Category`` bundles
an ordered list of titles under a display name, e.g. "Top 10".
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Title(BaseModel):
    """A single show or movie entry.

    ``artwork_id`` is ``None`` until the title has been enriched for a
    request; see ``LolomoService.enrich``.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    artwork_id: Optional[str] = None


class Category(BaseModel):
    """A named, ordered row of titles computed per request."""

    id: int
    name: str
    # Never None: an unknown category is simply an empty row.
    titles: List[Title] = Field(default_factory=list)
