from __future__ import annotations

"""Edge detection on the intent flag."""

from typing import Optional

from uitransition.core.errors import InvalidTransitionRequest
from uitransition.core.states import ENTER_FROM, EXIT_FROM, TransitionRequest, TransitionState


class PropertyChangeListener:
    """Compares the previous and next ``in`` flag and picks the sequence to run."""

    @staticmethod
    def detect(previous_in: bool, next_in: bool, state: TransitionState) -> Optional[TransitionRequest]:
        """
        Return the requested sequence, or None when ``in`` did not change.

        Raises:
            InvalidTransitionRequest: If the edge does not start from a valid state
        """
        if previous_in == next_in:
            return None
        if next_in:
            if state not in ENTER_FROM:
                raise InvalidTransitionRequest(next_in, state)
            return TransitionRequest.ENTER
        if state not in EXIT_FROM:
            raise InvalidTransitionRequest(next_in, state)
        return TransitionRequest.EXIT


__all__ = ["PropertyChangeListener"]
