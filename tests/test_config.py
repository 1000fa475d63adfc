import pytest
from pydantic import ValidationError

from lolomo.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("ARTWORK_DELAY_MS", "ARTWORK_POOL_SIZE", "ARTWORK_FALLBACK",
                 "ARTWORK_TIMEOUT_SECONDS", "SERVICE_NAME", "PORT"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.service_name == "lolomo"
    assert settings.artwork_delay_ms == 200
    assert settings.artwork_delay_seconds == 0.2
    assert settings.artwork_pool_size == 10
    assert settings.artwork_fallback == "default_artwork_url"
    assert settings.artwork_timeout_seconds is None
    assert settings.port == 8000


def test_env_is_read_at_construction(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ARTWORK_DELAY_MS", "0")
    monkeypatch.setenv("ARTWORK_POOL_SIZE", "4")
    monkeypatch.setenv("ARTWORK_TIMEOUT_SECONDS", "1.5")

    settings = Settings()

    assert settings.artwork_delay_ms == 0
    assert settings.artwork_pool_size == 4
    assert settings.artwork_timeout_seconds == 1.5


def test_explicit_values_override_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ARTWORK_POOL_SIZE", "4")
    assert Settings(artwork_pool_size=2).artwork_pool_size == 2


@pytest.mark.parametrize("name, value", [
    ("ARTWORK_POOL_SIZE", "0"),
    ("ARTWORK_DELAY_MS", "-1"),
    ("ARTWORK_DELAY_MS", "slow"),
    ("ARTWORK_TIMEOUT_SECONDS", "0"),
    ("ARTWORK_TIMEOUT_SECONDS", "-1"),
])
def test_invalid_env_rejected(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        Settings()
