"""Configuration management for awto.

Usage:
    >>> from awto.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.project_root)
"""

from awto.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
