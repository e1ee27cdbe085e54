"""Print helpers for invoke task output."""

from __future__ import annotations

import functools
import inspect
from typing import TYPE_CHECKING, Any, ParamSpec, TypeVar

from .console import Panel, Text, console

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")


def print_banner(title: str, data: dict[str, Any] | None = None) -> None:
    """Print a boxed title with optional key-value lines below it."""
    content = Text()
    for i, (key, value) in enumerate((data or {}).items()):
        if i > 0:
            content.append("\n")
        content.append(f"{key}: ", style="dim")
        content.append(str(value), style="cyan")
    console.print()
    console.print(Panel(content, style="blue", title=f"[bold]{title}[/]", title_align="center"))
    console.print()


def print_info(message: str) -> None:
    console.print(f"  {message}")


def print_success(message: str = "SUCCESS") -> None:
    console.print()
    console.print(f"[bold green]✓ {message}[/]")


def with_banner() -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorator printing a banner named after the task and its non-default arguments.

    Example:
        @with_banner()
        def run_tests(ctx, marker=None): ...

        # run_tests(ctx, marker="slow") prints a "RUN TESTS" banner with "Marker: slow"
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            bound = inspect.signature(func).bind(*args, **kwargs)
            bound.apply_defaults()
            title = func.__name__.replace("_", " ").upper()  # type: ignore[attr-defined]
            data = {
                name.replace("_", " ").title(): value
                for name, value in bound.arguments.items()
                if name != "ctx" and value is not None and value is not False
            }
            print_banner(title, data or None)
            return func(*args, **kwargs)

        return wrapper

    return decorator


__all__ = ["print_banner", "print_info", "print_success", "with_banner"]
