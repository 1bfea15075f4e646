"""Application configuration helpers."""

from __future__ import annotations

from .editor import EditorConfig, get_editor_config
from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .logging import configure_logging
from .view import ViewConfig, get_view_config

__all__ = [
    "ConfigurationError",
    "EditorConfig",
    "MissingConfigurationError",
    "ViewConfig",
    "configure_logging",
    "get_editor_config",
    "get_view_config",
    "optional_env_var",
    "require_env_vars",
]
