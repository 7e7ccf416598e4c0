"""Exceptions raised by the transition core."""

from __future__ import annotations

from typing import Iterable, Optional

from pydantic import ValidationError

from uitransition.core.states import TransitionState


class TransitionError(RuntimeError):
    """Base class for transition controller failures."""


class InvalidTimeoutConfig(TransitionError):
    """Timeout missing, negative, non-numeric or a malformed enter/exit split."""

    def __init__(self, message: str, *, cause: Exception | None = None):
        self.message = message
        self.cause = cause
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        if isinstance(self.cause, ValidationError):
            return f"{self.message}: {summarize_validation_errors(self.cause.errors())}"
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __str__(self) -> str:
        return self._build_message()


class InvalidTransitionRequest(TransitionError):
    """An intent edge that does not start from a valid state."""

    def __init__(self, requested_in: bool, state: TransitionState):
        self.requested_in = requested_in
        self.state = state
        super().__init__(f"Cannot move in={requested_in} while {state.value}")


class InvalidStateEdge(TransitionError):
    """A state write along an undefined edge."""

    def __init__(self, source: TransitionState, target: TransitionState):
        self.source = source
        self.target = target
        super().__init__(f"Undefined state edge: {source.value} -> {target.value}")


class TransitionDisposedError(TransitionError):
    """The controller was disposed and no longer accepts updates."""


def summarize_validation_errors(errors: Iterable[dict], limit: int = 3) -> str:
    """Render the first ``limit`` pydantic errors as ``loc: msg`` snippets."""
    error_list = list(errors)
    snippets = []
    for err in error_list:
        loc = ".".join(str(entry) for entry in err.get("loc", [])) or "<root>"
        msg = err.get("msg") or err.get("type") or "validation error"
        snippets.append(f"{loc}: {msg}")
        if len(snippets) >= limit:
            break
    remaining = len(error_list) - len(snippets)
    if remaining > 0:
        snippets.append(f"... ({remaining} more)")
    return "; ".join(snippets)


def is_timeout_error(err: dict) -> bool:
    loc: Optional[tuple] = err.get("loc")
    return bool(loc) and loc[0] == "timeout"


__all__ = [
    "TransitionError",
    "InvalidTimeoutConfig",
    "InvalidTransitionRequest",
    "InvalidStateEdge",
    "TransitionDisposedError",
    "summarize_validation_errors",
    "is_timeout_error",
]
