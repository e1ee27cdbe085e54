"""Internal utilities for the netutil package."""

from __future__ import annotations

from .config import Settings, get_settings
from .logging import configure_logging

__all__ = ["Settings", "configure_logging", "get_settings"]
