"""Rich console shared by the invoke tasks."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

console = Console()

__all__ = ["Console", "Panel", "Text", "console"]
