"""
Simple data store for the catalogue.

The ``DEFAULT_TITLES`` tuple is the built-in catalogue, fixed at import
time and never mutated. A ``Catalog`` wraps an immutable sequence of
``Title`` records (the built-in one unless another is injected by the
composition root) and answers the two lookups the service needs: every
title, and the titles of one category. Neither lookup has a failure
mode; unknown categories are empty rows.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from .schemas import Title

DEFAULT_TITLES: Tuple[Title, ...] = tuple(
    Title(name=name)
    for name in (
        "The Witcher",
        "Wednesday",
        "Sweet Tooth",
        "Black Mirror",
        "Sex Education",
        "Manifest",
        "Love is Blind",
        "You",
        "Receiver",
        "The Last Dance",
    )
)

TOP_10 = 1
CONTINUE_WATCHING = 2

# Positions into the catalogue for categories that are not the full list.
CATEGORY_POSITIONS: Dict[int, Tuple[int, ...]] = {
    CONTINUE_WATCHING: (9, 7, 0),
}


class Catalog:
    """Read-only, ordered collection of titles.

    Parameters
    ----------
    titles : Optional[Iterable[Title]]
        The catalogue contents. Defaults to ``DEFAULT_TITLES``. The
        sequence is copied into a tuple so later changes to the caller's
        list cannot leak into the catalogue.
    """

    def __init__(self, titles: Optional[Iterable[Title]] = None) -> None:
        self._titles: Tuple[Title, ...] = (
            DEFAULT_TITLES if titles is None else tuple(titles)
        )

    def all_titles(self) -> List[Title]:
        """Return every title in catalogue order."""
        return list(self._titles)

    def titles_for_category(self, category_id: int) -> List[Title]:
        """Return the titles of a category.

        Parameters
        ----------
        category_id : int
            ``1`` yields the full catalogue, ``2`` a fixed selection by
            position. Any other id yields an empty list.

        Returns
        -------
        List[Title]
            The titles of the category, in category order. Positions
            beyond the end of a shorter injected catalogue are skipped.
        """
        if category_id == TOP_10:
            return self.all_titles()
        positions = CATEGORY_POSITIONS.get(category_id, ())
        return [self._titles[p] for p in positions if p < len(self._titles)]
