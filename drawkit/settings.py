"""Configuration via pydantic-settings."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Random sources: used when a RandomSource is built without an explicit seed
    # e.g. DRAWKIT_SEED=42 makes every default-constructed source reproducible
    seed: int | None = None

    # next_long() truncates a double draw by default; set DRAWKIT_EXACT_LONG_RANGES=true
    # for an integer-native draw (exact for ranges wider than 2**53)
    exact_long_ranges: bool = False

    model_config = {"env_prefix": "DRAWKIT_", "env_file": ".env", "extra": "ignore"}


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return a cached singleton Settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
