from __future__ import annotations

"""Decides whether the controlled node should exist."""

from uitransition.core.states import TransitionState


def should_mount(state: TransitionState, mount_on_enter: bool = False, unmount_on_exit: bool = False) -> bool:
    """Return False only for UNMOUNTED.

    The flags do not change the answer for a given state; they decide which
    states are reachable (UNMOUNTED is only entered initially under
    ``mount_on_enter`` or after an exit under ``unmount_on_exit``).
    """
    return state is not TransitionState.UNMOUNTED


def initial_state(in_: bool, appear: bool, mount_on_enter: bool) -> TransitionState:
    """State a controller starts in for its first configuration."""
    if in_ and not appear:
        return TransitionState.ENTERED
    return TransitionState.UNMOUNTED if mount_on_enter else TransitionState.EXITED


__all__ = ["should_mount", "initial_state"]
