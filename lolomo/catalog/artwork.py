"""
Artwork generation for catalogue titles.

``ArtworkGenerator`` stands in for a slow downstream artwork service:
every call waits for a configurable delay and then returns a fresh
identifier made of a random UUID and a slug of the title. The value is
unique per call, not deterministic per title. Callers that must not
block (the GraphQL field resolver) go through
``LolomoService.resolve_artwork``, which runs this on a worker pool.
"""

from __future__ import annotations

import logging
import time
import uuid

logger = logging.getLogger(__name__)


def _slugify(title: str) -> str:
    return title.lower().replace(" ", "-")


class ArtworkGenerator:
    """Generate artwork identifiers after an artificial delay.

    Parameters
    ----------
    delay_seconds : float
        Time to sleep before returning, emulating downstream latency.
        ``0`` disables the delay.
    """

    def __init__(self, delay_seconds: float = 0.2) -> None:
        if delay_seconds < 0:
            raise ValueError("delay_seconds must be >= 0")
        self.delay_seconds = delay_seconds

    def generate(self, title: str) -> str:
        logger.info("Generating artwork for %s", title)
        if self.delay_seconds:
            time.sleep(self.delay_seconds)
        return f"{uuid.uuid4()}-{_slugify(title)}"
