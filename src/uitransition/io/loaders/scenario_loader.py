from __future__ import annotations

import glob
import os
from pathlib import Path
from typing import Any, Dict, List

import yaml
from pydantic import ValidationError

from uitransition.core.errors import TransitionError
from uitransition.core.file_spec import Scenario, ScenarioFileSpec
from uitransition.io.loaders.errors import LoaderError
from uitransition.utils.logging import log_calls


def _read_yaml(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise LoaderError(path, "Malformed YAML", cause=exc) from exc
    if not isinstance(data, dict):
        raise LoaderError(path, "Scenario file must contain a mapping")
    return data


@log_calls()
def load_scenario(path: str) -> Scenario:
    """Load one scenario file.

    Expected format:
    transition:
      in: false
      timeout: {enter: 300, exit: 150}
      entering_hint: fade-entering
    timeline:
      - at: 0
        in: true
    settle: 50
    """
    data = _read_yaml(path)
    try:
        spec = ScenarioFileSpec.model_validate(data)
    except ValidationError as exc:
        raise LoaderError(path, "Invalid scenario definition", cause=exc) from exc
    try:
        return spec.build(Path(path).stem)
    except (TransitionError, ValidationError) as exc:
        raise LoaderError(path, "Invalid transition configuration", cause=exc) from exc


@log_calls()
def load_scenarios(path: str) -> List[Scenario]:
    """Load every ``*.yaml`` scenario under ``path`` (a file or a directory tree)."""
    if os.path.isfile(path):
        return [load_scenario(path)]
    if not os.path.exists(path):
        return []
    files = sorted(glob.glob(os.path.join(path, "**", "*.yaml"), recursive=True))
    scenarios: List[Scenario] = []
    seen: Dict[str, str] = {}
    for fp in files:
        scenario = load_scenario(fp)
        if scenario.name in seen:
            raise LoaderError(fp, f"Duplicate scenario name '{scenario.name}' (first defined in {seen[scenario.name]})")
        seen[scenario.name] = fp
        scenarios.append(scenario)
    return scenarios
