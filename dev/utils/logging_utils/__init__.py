"""Terminal output for invoke tasks, using Rich (dev dependency).

Usage:
    from dev.utils import logging_utils

    @task
    @logging_utils.with_banner()
    def lint(ctx): ...
"""

from .console import console
from .printers import print_banner, print_info, print_success, with_banner

__all__ = ["console", "print_banner", "print_info", "print_success", "with_banner"]
