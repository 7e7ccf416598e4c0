from __future__ import annotations

"""Rich renderables for CLI output."""

from rich.table import Table

from uitransition.core.file_spec import Scenario
from uitransition.core.states import VALID_EDGES, TransitionState
from uitransition.services.scenario_runner import ScenarioResult

_STATE_STYLES = {
    TransitionState.UNMOUNTED: "dim",
    TransitionState.EXITED: "red",
    TransitionState.ENTERING: "yellow",
    TransitionState.ENTERED: "green",
    TransitionState.EXITING: "magenta",
}


def format_state(state: TransitionState) -> str:
    style = _STATE_STYLES.get(state, "white")
    return f"[{style}]{state.value}[/{style}]"


def build_trace_table(result: ScenarioResult) -> Table:
    table = Table(title=f"Scenario: {result.scenario}")
    table.add_column("t (ms)", justify="right")
    table.add_column("Event")
    table.add_column("State")
    table.add_column("Hint")
    table.add_column("Mounted")
    table.add_column("Class")

    for entry in result.trace:
        table.add_row(
            f"{entry.at_ms:.1f}",
            entry.event,
            format_state(entry.state),
            entry.hint or "-",
            "yes" if entry.mounted else "no",
            entry.class_name or "-",
        )
    return table


def build_states_table() -> Table:
    table = Table(title="Transition states")
    table.add_column("State")
    table.add_column("Next states")
    for state in TransitionState:
        targets = sorted(target.value for target in VALID_EDGES[state])
        table.add_row(format_state(state), ", ".join(targets))
    return table


def build_scenarios_table(scenarios: list[Scenario]) -> Table:
    table = Table(title="Scenarios")
    table.add_column("Name")
    table.add_column("Steps", justify="right")
    table.add_column("Timeout")
    table.add_column("Flags")
    for scenario in scenarios:
        cfg = scenario.config
        flags = [
            name
            for name, enabled in (
                ("in", cfg.in_),
                ("appear", cfg.appear),
                ("mount_on_enter", cfg.mount_on_enter),
                ("unmount_on_exit", cfg.unmount_on_exit),
            )
            if enabled
        ]
        timeout = cfg.timeout.model_dump(exclude={"kind"})
        table.add_row(
            scenario.name,
            str(len(scenario.timeline)),
            ", ".join(f"{k}={v:g}" for k, v in timeout.items()),
            ", ".join(flags) or "-",
        )
    return table
