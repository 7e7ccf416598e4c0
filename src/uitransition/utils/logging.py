from __future__ import annotations
import logging
from functools import wraps
from typing import Any, Callable


def log_calls(
    logger_name: str | None = None, *, level: int = logging.DEBUG
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator logging entry and result of a call at ``level``; failures are logged then re-raised."""

    def _decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        logger = logging.getLogger(logger_name or func.__module__)

        @wraps(func)
        def _wrapper(*args: Any, **kwargs: Any) -> Any:
            if logger.isEnabledFor(level):
                logger.log(level, "%s(%s)", func.__name__, ", ".join(_describe(args, kwargs)))
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.exception("%s failed: %s", func.__name__, e)
                raise
            logger.log(level, "%s -> %r", func.__name__, result)
            return result

        return _wrapper

    return _decorator


def _describe(args: tuple, kwargs: dict) -> list[str]:
    return [repr(a) for a in args] + [f"{k}={v!r}" for k, v in kwargs.items()]


def configure_logging(verbose: bool = False) -> None:
    """Root logging setup for the CLI: DEBUG with ``--verbose``, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
