from .errors import LoaderError
from .scenario_loader import load_scenario, load_scenarios

__all__ = ["load_scenario", "load_scenarios", "LoaderError"]
