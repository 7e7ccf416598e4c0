"""
Transition States

The five lifecycle states of a transitioned node and the edges allowed
between them.

Lifecycle:
    unmounted ──> exited ──> entering ──> entered
                    ^                        │
                    └──── exiting <──────────┘
                             │
                             └──> unmounted   (unmount_on_exit)

entering and exiting may also reverse into each other when the intent flag
flips again before the pending timer fires.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet


class TransitionState(str, Enum):
    """Lifecycle state of a transitioned node."""

    UNMOUNTED = "unmounted"
    EXITED = "exited"
    ENTERING = "entering"
    ENTERED = "entered"
    EXITING = "exiting"

    @property
    def is_transitional(self) -> bool:
        return self in (TransitionState.ENTERING, TransitionState.EXITING)


class TransitionRequest(str, Enum):
    """Which phase sequence an intent edge asks for."""

    ENTER = "enter"
    EXIT = "exit"


VALID_EDGES: Dict[TransitionState, FrozenSet[TransitionState]] = {
    TransitionState.UNMOUNTED: frozenset({TransitionState.EXITED}),
    TransitionState.EXITED: frozenset({TransitionState.ENTERING}),
    TransitionState.ENTERING: frozenset({TransitionState.ENTERED, TransitionState.EXITING}),
    TransitionState.ENTERED: frozenset({TransitionState.EXITING}),
    TransitionState.EXITING: frozenset(
        {TransitionState.EXITED, TransitionState.UNMOUNTED, TransitionState.ENTERING}
    ),
}

# States from which each sequence may start
ENTER_FROM: FrozenSet[TransitionState] = frozenset(
    {TransitionState.UNMOUNTED, TransitionState.EXITED, TransitionState.EXITING}
)
EXIT_FROM: FrozenSet[TransitionState] = frozenset({TransitionState.ENTERED, TransitionState.ENTERING})


def can_move(source: TransitionState, target: TransitionState) -> bool:
    """Return True if ``source -> target`` is a defined edge."""
    return target in VALID_EDGES[source]


__all__ = [
    "TransitionState",
    "TransitionRequest",
    "VALID_EDGES",
    "ENTER_FROM",
    "EXIT_FROM",
    "can_move",
]
