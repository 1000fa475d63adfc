"""
Catalogue service composing the store and the artwork generator.

``LolomoService`` answers the two read queries (the category rows and
the title search) synchronously, and resolves artwork identifiers
asynchronously on a bounded thread pool. Artwork failures never reach
the caller: any error in the worker is logged and replaced by a fixed
fallback identifier.
"""

from __future__ import annotations

import asyncio
import logging
from concurrent.futures import Executor
from typing import Iterable, List, Optional

from .artwork import ArtworkGenerator
from .schemas import Category, Title
from .store import CONTINUE_WATCHING, TOP_10, Catalog

logger = logging.getLogger(__name__)

DEFAULT_ARTWORK_FALLBACK = "default_artwork_url"

CATEGORY_NAMES = (
    (TOP_10, "Top 10"),
    (CONTINUE_WATCHING, "Continue Watching"),
)


class LolomoService:
    """Read queries over a ``Catalog`` plus per-title artwork resolution.

    Parameters
    ----------
    catalog : Catalog
        Source of titles.
    artwork : ArtworkGenerator
        Generator run on ``executor`` for each artwork request.
    executor : Executor
        Worker pool artwork generation is submitted to. Owned by the
        composition root; this class never shuts it down.
    fallback : str
        Identifier returned whenever artwork generation fails.
    timeout : Optional[float]
        Seconds to wait for a single generation before falling back.
        ``None`` waits until the worker finishes.
    """

    def __init__(
        self,
        catalog: Catalog,
        artwork: ArtworkGenerator,
        executor: Executor,
        fallback: str = DEFAULT_ARTWORK_FALLBACK,
        timeout: Optional[float] = None,
    ) -> None:
        self.catalog = catalog
        self.artwork = artwork
        self.executor = executor
        self.fallback = fallback
        self.timeout = timeout

    def list_categories(self) -> List[Category]:
        """Return the home rows: "Top 10" then "Continue Watching".

        Catalogue errors propagate; no partial list is returned.
        """
        return [
            Category(id=category_id, name=name, titles=self.category_titles(category_id))
            for category_id, name in CATEGORY_NAMES
        ]

    def category_titles(self, category_id: int) -> List[Title]:
        """Return the titles of one category; a missing row is ``[]``."""
        return self.catalog.titles_for_category(category_id) or []

    def search(self, query: str) -> List[Title]:
        """Return titles whose name starts with ``query`` (case-sensitive)."""
        return [t for t in self.catalog.all_titles() if t.name.startswith(query)]

    async def resolve_artwork(self, title: Title) -> str:
        """Generate the artwork identifier for ``title`` on the worker pool.

        Returns the generated identifier, or ``self.fallback`` if the
        work item fails, is cancelled, cannot be submitted or exceeds
        the timeout. Cancelling the awaiting task itself still raises
        ``CancelledError``.
        """
        loop = asyncio.get_running_loop()
        try:
            future = loop.run_in_executor(self.executor, self.artwork.generate, title.name)
            if self.timeout is None:
                return await future
            return await asyncio.wait_for(future, self.timeout)
        except asyncio.CancelledError:
            task = asyncio.current_task()
            if task is not None and task.cancelling():
                raise
            logger.warning("Artwork generation cancelled for %s, using fallback", title.name)
            return self.fallback
        except Exception:
            logger.warning(
                "Artwork generation failed for %s, using fallback", title.name, exc_info=True
            )
            return self.fallback

    async def enrich(self, titles: Iterable[Title]) -> List[Title]:
        """Return copies of ``titles`` with ``artwork_id`` resolved.

        All titles are resolved concurrently; the result keeps the input
        order no matter which resolution finishes first.
        """
        titles = list(titles)
        artwork_ids = await asyncio.gather(*(self.resolve_artwork(t) for t in titles))
        return [
            t.model_copy(update={"artwork_id": artwork_id})
            for t, artwork_id in zip(titles, artwork_ids)
        ]
