"""
Base configuration for sessionizer.

Settings come from SESSIONIZER_* environment variables or a .env file.
"""

from __future__ import annotations

import os
import pathlib
from typing import Literal, TypeVar

import lazy_object_proxy
import pydantic
import pydantic_settings

T = TypeVar('T', bound='BaseSessionizerSettings')

# Standard and bright foreground SGR codes
FOREGROUND_COLORS = frozenset([*range(30, 38), *range(90, 98)])


class BaseSessionizerSettings(pydantic_settings.BaseSettings):
    """Shared configuration for the sessionizer entry points."""

    model_config = pydantic_settings.SettingsConfigDict(
        env_prefix='SESSIONIZER_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True,  # Fail fast on misconfiguration
        extra='forbid',  # Reject unknown settings
    )

    # Application metadata
    APP_NAME: str = 'sessionizer'
    VERSION: str = '0.1.0'

    # External programs
    TMUX_BINARY: str = 'tmux'
    FZF_BINARY: str = 'fzf'
    FZF_OPTIONS: list[str] = ['--ansi']

    # Picker labels
    DISPLAY_STYLE: Literal['parent', 'name'] = 'parent'
    LIVE_COLOR: int = 34  # blue
    ATTACHED_COLOR: int = 32  # green

    @pydantic.field_validator('LIVE_COLOR', 'ATTACHED_COLOR')
    @classmethod
    def validate_color(cls, v: int) -> int:
        """Validate color is an ANSI foreground code."""
        if v not in FOREGROUND_COLORS:
            raise ValueError('color must be an ANSI foreground code (30-37 or 90-97)')
        return v


def get_settings(settings_class: type[T], env_file: str | None = None) -> T:
    """
    Factory for creating settings with dynamic .env file loading.

    LOAD_ENV_FILE environment variable specifies custom .env file path.
    When unset, loads from environment variables (and ./.env if present).

    Args:
        settings_class: Settings class to instantiate
        env_file: Optional path to .env file (overrides LOAD_ENV_FILE)

    Returns:
        Settings instance

    Raises:
        FileNotFoundError: If specified .env file doesn't exist
    """
    env_file_path = env_file or os.getenv('LOAD_ENV_FILE')

    if not env_file_path:
        return settings_class()

    resolved_path = pathlib.Path(env_file_path).resolve()
    if not resolved_path.exists():
        raise FileNotFoundError(f'Environment file not found: {resolved_path}')

    return settings_class(_env_file=resolved_path)


def lazy_settings(settings_class: type[T]) -> T:
    """
    Lazy settings - defers instantiation until first access.

    Args:
        settings_class: Settings class to instantiate

    Returns:
        Proxy that instantiates settings on first access
    """
    return lazy_object_proxy.Proxy(lambda: get_settings(settings_class))
