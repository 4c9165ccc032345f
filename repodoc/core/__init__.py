"""
Core Module - Configuration, exceptions and dependency wiring.
"""

from repodoc.core.config import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
