from .errors import LoaderError
from .scenario_loader import load_scenarios

__all__ = ["load_scenarios", "LoaderError"]
