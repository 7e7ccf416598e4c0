"""Scenario Runner: drives a transition controller through a timeline and records a trace."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, List, Optional

from pydantic import BaseModel, Field

from uitransition.core.config import PHASE_CALLBACKS
from uitransition.core.file_spec import Scenario
from uitransition.core.machine import TransitionStateMachine
from uitransition.core.states import TransitionState
from uitransition.host.memory import InMemoryHost
from uitransition.host.styles import StyleSheet

logger = logging.getLogger(__name__)


class TraceEntry(BaseModel):
    at_ms: float
    event: str  # init, update, or a phase callback name
    state: TransitionState
    hint: str
    mounted: bool
    class_name: str = ""


class ScenarioResult(BaseModel):
    scenario: str
    trace: List[TraceEntry] = Field(default_factory=list)
    final_state: TransitionState
    final_hint: str
    mounted: bool
    stylesheet: str = ""

    def events(self) -> List[str]:
        return [entry.event for entry in self.trace]


class _Recorder:
    """Appends a TraceEntry for every observed event."""

    def __init__(self, loop: asyncio.AbstractEventLoop, host: InMemoryHost):
        self.loop = loop
        self.host = host
        self.started = loop.time()
        self.machine: Optional[TransitionStateMachine] = None
        self.trace: List[TraceEntry] = []

    def elapsed_ms(self) -> float:
        return (self.loop.time() - self.started) * 1000.0

    def record(self, event: str) -> None:
        machine = self.machine
        if machine is None:
            raise RuntimeError("Recorder used before its machine was attached")
        node = self.host.current_node()
        self.trace.append(
            TraceEntry(
                at_ms=round(self.elapsed_ms(), 1),
                event=event,
                state=machine.state,
                hint=machine.hint,
                mounted=node is not None,
                class_name=node.class_name if node is not None else "",
            )
        )

    def callback(self, event: str) -> Callable[[Any], None]:
        def _callback(node: Any) -> None:
            self.record(event)

        _callback.__name__ = event
        return _callback


class ScenarioRunner:
    """
    Runs scenarios against an InMemoryHost.

    Timeline steps are applied at their ``at`` offsets (milliseconds from the
    start); after the last step the runner waits ``settle`` milliseconds and
    then until no phase timer is pending.
    """

    def __init__(self, host_factory: Callable[[], InMemoryHost] = InMemoryHost):
        self.host_factory = host_factory

    async def run(self, scenario: Scenario) -> ScenarioResult:
        loop = asyncio.get_running_loop()
        host = self.host_factory()
        sheet = StyleSheet()
        for rules in scenario.styles:
            sheet.inject(rules)

        recorder = _Recorder(loop, host)
        callbacks = {name: recorder.callback(name) for name in PHASE_CALLBACKS}
        machine = TransitionStateMachine(scenario.config.with_changes(callbacks), host, loop=loop)
        recorder.machine = machine
        recorder.record("init")

        try:
            for step in scenario.timeline:
                delay = step.at - recorder.elapsed_ms()
                if delay > 0:
                    await asyncio.sleep(delay / 1000.0)
                logger.debug("Applying step at %sms: %s", step.at, step.changes)
                recorder.record("update")
                machine.update(**step.changes)
            if scenario.settle:
                await asyncio.sleep(scenario.settle / 1000.0)
            while machine.has_pending_timer:
                await asyncio.sleep(0.001)
        finally:
            machine.dispose()

        return ScenarioResult(
            scenario=scenario.name,
            trace=recorder.trace,
            final_state=machine.state,
            final_hint=machine.hint,
            mounted=machine.is_mounted,
            stylesheet=sheet.text,
        )


def run_scenario(scenario: Scenario, runner: ScenarioRunner | None = None) -> ScenarioResult:
    """Synchronous entry point; starts its own event loop."""
    return asyncio.run((runner or ScenarioRunner()).run(scenario))


__all__ = ["TraceEntry", "ScenarioResult", "ScenarioRunner", "run_scenario"]
