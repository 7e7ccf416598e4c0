"""
Transition Configuration

TransitionConfig is the validated configuration surface of a transition
controller: the intent flag, timing, mount policy flags, per-state
presentation hints and the six phase callbacks.

Fields accept both their Python names and the camelCase aliases used by
host-side props (``in``, ``mountOnEnter``, ``enteringHint``, ``onEnter`` ...).
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from uitransition.core.errors import InvalidTimeoutConfig, is_timeout_error
from uitransition.core.states import TransitionState
from uitransition.core.timeout import Timeout, coerce_timeout

PhaseCallback = Callable[[Any], Any]

PHASE_CALLBACKS = ("on_enter", "on_entering", "on_entered", "on_exit", "on_exiting", "on_exited")


def _noop(node: Any) -> None:
    return None


class TransitionConfig(BaseModel):
    """
    Configuration of a single transitioned node.

    Attributes:
        in_: Intent flag; True asks for the node to be present and entered
        appear: Run the entering sequence on first mount when ``in_`` starts True
        timeout: Phase duration(s) in milliseconds
        mount_on_enter: Defer creating the node until the first entry
        unmount_on_exit: Remove the node once an exit completes
        entering_hint / entered_hint / exiting_hint / exited_hint:
            Presentation hints handed to the host per state
        on_enter ... on_exited: Phase callbacks, each called with the node
    """

    in_: bool = Field(False, alias="in")
    appear: bool = False
    timeout: Timeout
    mount_on_enter: bool = Field(False, alias="mountOnEnter")
    unmount_on_exit: bool = Field(False, alias="unmountOnExit")

    entering_hint: str = Field("", alias="enteringHint")
    entered_hint: str = Field("", alias="enteredHint")
    exiting_hint: str = Field("", alias="exitingHint")
    exited_hint: str = Field("", alias="exitedHint")

    on_enter: Optional[PhaseCallback] = Field(None, alias="onEnter")
    on_entering: Optional[PhaseCallback] = Field(None, alias="onEntering")
    on_entered: Optional[PhaseCallback] = Field(None, alias="onEntered")
    on_exit: Optional[PhaseCallback] = Field(None, alias="onExit")
    on_exiting: Optional[PhaseCallback] = Field(None, alias="onExiting")
    on_exited: Optional[PhaseCallback] = Field(None, alias="onExited")

    model_config = {"populate_by_name": True, "arbitrary_types_allowed": True, "extra": "forbid"}

    @field_validator("timeout", mode="before")
    @classmethod
    def _coerce_timeout(cls, v: Any) -> Any:
        return coerce_timeout(v)

    @classmethod
    def create(cls, data: Mapping[str, Any] | None = None, **kwargs: Any) -> "TransitionConfig":
        """
        Validate a configuration, reporting timeout problems as InvalidTimeoutConfig.

        Raises:
            InvalidTimeoutConfig: If the timeout is missing or malformed
            ValidationError: For any other invalid field
        """
        payload = {**(data or {}), **kwargs}
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            if any(is_timeout_error(err) for err in exc.errors()):
                raise InvalidTimeoutConfig("Invalid transition timeout", cause=exc) from exc
            raise

    @classmethod
    def field_key(cls, key: str) -> Optional[str]:
        """Map a field name or alias to the field name, or None for foreign keys."""
        if key in cls.model_fields:
            return key
        for name, info in cls.model_fields.items():
            if info.alias == key:
                return name
        return None

    def field_values(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in type(self).model_fields}

    def with_changes(self, changes: Mapping[str, Any]) -> "TransitionConfig":
        """Return a re-validated copy with ``changes`` (keyed by field name) applied."""
        return type(self).create({**self.field_values(), **changes})

    def hint_overrides(self) -> Dict[TransitionState, str]:
        return {
            TransitionState.ENTERING: self.entering_hint,
            TransitionState.ENTERED: self.entered_hint,
            TransitionState.EXITING: self.exiting_hint,
            TransitionState.EXITED: self.exited_hint,
        }

    def callback(self, name: str) -> PhaseCallback:
        if name not in PHASE_CALLBACKS:
            raise KeyError(f"Unknown phase callback: {name}")
        return getattr(self, name) or _noop


__all__ = ["TransitionConfig", "PhaseCallback", "PHASE_CALLBACKS"]
