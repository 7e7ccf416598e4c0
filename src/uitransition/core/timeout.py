"""
Timeout Shapes

A transition timeout is either one duration used for both phases or a
separate enter/exit pair. Both shapes are resolved once, when a phase starts,
into a concrete number of milliseconds.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field

from uitransition.core.states import TransitionRequest

Milliseconds = Annotated[float, Field(ge=0, strict=True, allow_inf_nan=False)]


class UniformTimeout(BaseModel):
    """Same duration for entering and exiting."""

    kind: Literal["uniform"] = "uniform"
    duration: Milliseconds

    def resolve(self, request: TransitionRequest) -> float:
        return self.duration


class SplitTimeout(BaseModel):
    """Separate durations per phase."""

    kind: Literal["split"] = "split"
    enter: Milliseconds
    exit: Milliseconds

    def resolve(self, request: TransitionRequest) -> float:
        return self.enter if request is TransitionRequest.ENTER else self.exit


Timeout = Annotated[Union[UniformTimeout, SplitTimeout], Field(discriminator="kind")]


def coerce_timeout(value: Any) -> Any:
    """Normalize the accepted input shapes into tagged payloads.

    ``10`` -> uniform, ``{"enter": 10, "exit": 5}`` -> split. Already-built
    models and tagged dicts pass through untouched; anything else is left for
    the discriminated union to reject.
    """
    if isinstance(value, (UniformTimeout, SplitTimeout)):
        return value
    if isinstance(value, bool):
        raise ValueError("timeout must be a number of milliseconds, not a boolean")
    if isinstance(value, (int, float)):
        return {"kind": "uniform", "duration": value}
    if isinstance(value, dict) and "kind" not in value:
        if "duration" in value:
            return {"kind": "uniform", **value}
        return {"kind": "split", **value}
    if value is None:
        raise ValueError("timeout is required")
    return value


__all__ = ["Milliseconds", "UniformTimeout", "SplitTimeout", "Timeout", "coerce_timeout"]
