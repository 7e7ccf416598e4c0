from __future__ import annotations

"""Shared helpers for loading scenarios with CLI-friendly errors."""

from pathlib import Path
from typing import Any, Callable, TypeVar

import typer
from rich.console import Console

from uitransition.io.loaders import LoaderError

T = TypeVar("T")


def load_or_exit(
    loader_fn: Callable[..., T],
    path: str,
    *,
    console: Console,
    verbose_errors: bool = False,
    **kwargs: Any,
) -> T:
    if not Path(path).exists():
        console.print(f"[red]Path not found:[/red] {path}")
        raise typer.Exit(code=1)
    try:
        return loader_fn(path, **kwargs)
    except LoaderError as err:
        if verbose_errors and err.cause:
            console.print(f"[red]Failed to load scenario:[/red] {err.message}\n{err.cause}")
        else:
            console.print(f"[red]Failed to load scenario:[/red] {err}")
        raise typer.Exit(code=1)


__all__ = ["load_or_exit"]
