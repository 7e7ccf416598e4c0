"""
Transition State Machine

Drives a node through exited -> entering -> entered and entered -> exiting ->
exited in response to changes of the ``in`` flag.

Phase sequences:
    enter: [mount] -> commit -> on_enter -> ENTERING (+hint) -> on_entering
           -> timer -> ENTERED (+hint) -> on_entered
    exit:  commit -> on_exit -> EXITING (+hint) -> on_exiting
           -> timer -> EXITED (+hint) | UNMOUNTED (unmount) -> on_exited

Every state write goes through ``_move``, which checks the edge, keeps node
presence in line with the mount policy and hands the new hint to the host.
A flip of ``in`` while a phase is pending cancels its timer and starts the
opposite sequence from the current transitional state; the interrupted
phase's terminal callback never fires.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Mapping, Optional, Union

from uitransition.core.class_names import ClassNameResolver
from uitransition.core.config import TransitionConfig
from uitransition.core.errors import (
    InvalidStateEdge,
    InvalidTransitionRequest,
    TransitionDisposedError,
)
from uitransition.core.listener import PropertyChangeListener
from uitransition.core.mount_policy import initial_state, should_mount
from uitransition.core.states import TransitionRequest, TransitionState, can_move
from uitransition.core.timer import TimerScheduler
from uitransition.host.renderer import HostRenderer

logger = logging.getLogger(__name__)

ConfigInput = Union[TransitionConfig, Mapping[str, Any]]


class TransitionStateMachine:
    """Phase-transition controller for one node owned by ``host``."""

    def __init__(
        self,
        config: ConfigInput,
        host: HostRenderer,
        *,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        self._config = _as_config(config)
        self.host = host
        self._timer = TimerScheduler(loop)
        self._disposed = False

        cfg = self._config
        if cfg.in_ and cfg.appear:
            # the kickoff needs a loop; fail before the host mounts anything
            self._timer.loop()
        self._state = initial_state(cfg.in_, cfg.appear, cfg.mount_on_enter)
        if should_mount(self._state, cfg.mount_on_enter, cfg.unmount_on_exit):
            self.host.mount()
        self.host.apply_hint(self.hint)
        logger.debug("Initialized in %s", self._state.value)

        if cfg.in_ and cfg.appear:
            # after the initial commit, never inside the constructor
            self._timer.schedule(0, self._enter)

    # ------------------------------------------------------------------ surface

    @property
    def state(self) -> TransitionState:
        return self._state

    @property
    def config(self) -> TransitionConfig:
        return self._config

    @property
    def hint(self) -> str:
        return ClassNameResolver.resolve(self._state, self._config.hint_overrides())

    @property
    def node(self) -> Optional[Any]:
        return self.host.current_node()

    @property
    def is_mounted(self) -> bool:
        return self.host.has_node

    @property
    def has_pending_timer(self) -> bool:
        return self._timer.pending

    @property
    def disposed(self) -> bool:
        return self._disposed

    def update(self, config: Optional[ConfigInput] = None, **changes: Any) -> Optional[TransitionRequest]:
        """
        Apply a configuration update and start the transition it implies.

        Keyword changes are TransitionConfig fields (by name or alias); any
        other key is a regular prop and is staged on the host so it is
        committed before the next phase callback.

        Returns:
            The sequence that was started, or None

        Raises:
            TransitionDisposedError: If the controller was disposed
            InvalidTimeoutConfig: If the new timeout is malformed
            RuntimeError: If a transition is due and no event loop is available
        """
        if self._disposed:
            raise TransitionDisposedError("Cannot update a disposed transition")

        field_changes: Dict[str, Any] = {}
        props: Dict[str, Any] = {}
        for key, value in changes.items():
            name = TransitionConfig.field_key(key)
            if name is None:
                props[key] = value
            else:
                field_changes[name] = value

        base = self._config if config is None else _as_config(config)
        next_config = base.with_changes(field_changes) if field_changes else base
        try:
            request = PropertyChangeListener.detect(self._config.in_, next_config.in_, self._state)
        except InvalidTransitionRequest as exc:
            logger.debug("Ignoring intent change: %s", exc)
            if not next_config.in_:
                # drops an appear kickoff that has not run yet
                self._timer.cancel()
            request = None
        if request is not None:
            # raises without a running loop, leaving config and state untouched
            self._timer.loop()

        self._config = next_config
        if props:
            self.host.stage(**props)

        if request is TransitionRequest.ENTER:
            self._enter()
        elif request is TransitionRequest.EXIT:
            self._exit()
        else:
            self.host.commit()
            self.host.apply_hint(self.hint)
        return request

    def dispose(self) -> None:
        """Cancel any pending timer and refuse further updates."""
        self._timer.cancel()
        self._disposed = True

    # ---------------------------------------------------------------- sequences

    def _enter(self) -> None:
        self._timer.loop()
        duration = self._config.timeout.resolve(TransitionRequest.ENTER)
        self._timer.cancel()
        if self._state is TransitionState.UNMOUNTED:
            self._move(TransitionState.EXITED)
        self.host.commit()
        node = self.host.current_node()
        logger.debug("Entering from %s", self._state.value)

        self._config.callback("on_enter")(node)
        self._move(TransitionState.ENTERING)
        self._config.callback("on_entering")(node)
        self._timer.schedule(duration, self._entered, node)

    def _entered(self, node: Any) -> None:
        self._move(TransitionState.ENTERED)
        self._config.callback("on_entered")(node)

    def _exit(self) -> None:
        self._timer.loop()
        duration = self._config.timeout.resolve(TransitionRequest.EXIT)
        self._timer.cancel()
        self.host.commit()
        node = self.host.current_node()
        logger.debug("Exiting from %s", self._state.value)

        self._config.callback("on_exit")(node)
        self._move(TransitionState.EXITING)
        self._config.callback("on_exiting")(node)
        self._timer.schedule(duration, self._exited, node)

    def _exited(self, node: Any) -> None:
        if self._config.unmount_on_exit:
            self._move(TransitionState.UNMOUNTED)
        else:
            self._move(TransitionState.EXITED)
        self._config.callback("on_exited")(node)

    def _move(self, target: TransitionState) -> None:
        if not can_move(self._state, target):
            raise InvalidStateEdge(self._state, target)
        logger.debug("State %s -> %s", self._state.value, target.value)
        self._state = target

        cfg = self._config
        if should_mount(target, cfg.mount_on_enter, cfg.unmount_on_exit):
            self.host.mount()
            self.host.apply_hint(self.hint)
        else:
            self.host.unmount()

    def __repr__(self) -> str:
        return f"<TransitionStateMachine state={self._state.value} in={self._config.in_}>"


def _as_config(config: ConfigInput) -> TransitionConfig:
    if isinstance(config, TransitionConfig):
        return config
    return TransitionConfig.create(config)


__all__ = ["TransitionStateMachine"]
