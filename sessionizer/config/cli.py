"""
CLI configuration.

Extends base configuration with the directories scanned by default.
"""

from __future__ import annotations

from pathlib import Path

from sessionizer.config.base import BaseSessionizerSettings, lazy_settings


class CliSettings(BaseSessionizerSettings):
    """Command-line specific configuration."""

    # Used when neither -d nor -p is given, e.g. SESSIONIZER_DEFAULT_DIRECTORIES='["~/work"]'
    DEFAULT_DIRECTORIES: list[Path] = []


# Module-level singleton (lazy-loaded)
settings = lazy_settings(CliSettings)
