from __future__ import annotations

"""Presentation hint lookup per transition state."""

from typing import Mapping, Optional

from uitransition.core.states import TransitionState


class ClassNameResolver:
    """Maps a state and an optional per-state override table to a hint string."""

    @staticmethod
    def resolve(state: TransitionState, overrides: Optional[Mapping[TransitionState, str]] = None) -> str:
        # an unmounted node has nothing to carry a hint
        if state is TransitionState.UNMOUNTED or not overrides:
            return ""
        return overrides.get(state) or ""


__all__ = ["ClassNameResolver"]
