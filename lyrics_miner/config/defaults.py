"""Default configuration values for Lyrics Miner."""

from .config import LyricsMinerConfig


def create_default_config(**overrides) -> LyricsMinerConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        LyricsMinerConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            legacy_collation=True,
            preview_limit=50
        )
    """
    return LyricsMinerConfig(**overrides)
