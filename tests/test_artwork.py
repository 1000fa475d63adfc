import uuid
from unittest.mock import patch

import pytest

from lolomo.catalog.artwork import ArtworkGenerator


def test_generate_appends_slug_to_uuid() -> None:
    value = ArtworkGenerator(delay_seconds=0).generate("The Last Dance")

    assert value.endswith("-the-last-dance")
    uuid.UUID(value[:36])


def test_generate_is_unique_per_call() -> None:
    generator = ArtworkGenerator(delay_seconds=0)
    assert generator.generate("You") != generator.generate("You")


def test_generate_sleeps_for_configured_delay() -> None:
    with patch("lolomo.catalog.artwork.time.sleep") as sleep:
        ArtworkGenerator(delay_seconds=0.2).generate("Manifest")
    sleep.assert_called_once_with(0.2)


def test_zero_delay_does_not_sleep() -> None:
    with patch("lolomo.catalog.artwork.time.sleep") as sleep:
        ArtworkGenerator(delay_seconds=0).generate("Manifest")
    sleep.assert_not_called()


def test_negative_delay_rejected() -> None:
    with pytest.raises(ValueError):
        ArtworkGenerator(delay_seconds=-1)
