"""Configuration management for Lyrics Miner."""

from .config import DEFAULT_DENYLISTED_FORMS, LyricsMinerConfig
from .defaults import create_default_config

__all__ = ["LyricsMinerConfig", "DEFAULT_DENYLISTED_FORMS", "create_default_config"]
