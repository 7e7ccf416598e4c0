"""Service Layer: scenario orchestration."""

from __future__ import annotations

from .scenario_runner import ScenarioResult, ScenarioRunner, TraceEntry, run_scenario

__all__ = [
    "ScenarioResult",
    "ScenarioRunner",
    "TraceEntry",
    "run_scenario",
]
