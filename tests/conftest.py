"""
Shared fixtures for transition tests.
"""

import asyncio
from typing import Any, Callable, Dict, List, Tuple

import pytest

from uitransition.core.machine import TransitionStateMachine
from uitransition.core.mount_policy import should_mount
from uitransition.host.memory import InMemoryHost


class PhaseLog:
    """Records phase callbacks with the state, class name and presence seen at call time."""

    def __init__(self, host: InMemoryHost):
        self.host = host
        self.machine: TransitionStateMachine | None = None
        self.calls: List[Tuple[str, Any, str, bool]] = []
        self.mount_mismatches: List[str] = []
        self._waiters: Dict[str, asyncio.Future] = {}

    def callback(self, name: str) -> Callable[[Any], None]:
        def _callback(node: Any) -> None:
            assert self.machine is not None
            state = self.machine.state
            live = self.host.current_node()
            if (live is not None) != should_mount(state):
                self.mount_mismatches.append(name)
            self.calls.append((name, state, live.class_name if live is not None else "", live is not None))
            waiter = self._waiters.pop(name, None)
            if waiter is not None and not waiter.done():
                waiter.set_result(node)

        return _callback

    def callbacks(self, *names: str) -> Dict[str, Callable[[Any], None]]:
        return {name: self.callback(name) for name in names}

    def all_callbacks(self) -> Dict[str, Callable[[Any], None]]:
        return self.callbacks("on_enter", "on_entering", "on_entered", "on_exit", "on_exiting", "on_exited")

    def names(self) -> List[str]:
        return [call[0] for call in self.calls]

    async def wait_for(self, name: str, timeout: float = 1.0) -> Any:
        future = asyncio.get_running_loop().create_future()
        self._waiters[name] = future
        return await asyncio.wait_for(future, timeout)


@pytest.fixture
def host() -> InMemoryHost:
    return InMemoryHost()


@pytest.fixture
def phase_log(host: InMemoryHost) -> PhaseLog:
    return PhaseLog(host)


@pytest.fixture
def make_machine(host: InMemoryHost, phase_log: PhaseLog):
    """Build a machine whose six callbacks feed ``phase_log``."""

    def _make(**config: Any) -> TransitionStateMachine:
        payload = {**phase_log.all_callbacks(), **config}
        machine = TransitionStateMachine(payload, host)
        phase_log.machine = machine
        return machine

    return _make
