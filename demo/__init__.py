from .runner import DemoRunner, DemoSummary
from .scenarios import SCENARIOS, Scenario

__all__ = ["DemoRunner", "DemoSummary", "SCENARIOS", "Scenario"]
