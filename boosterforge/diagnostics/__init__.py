"""Offline diagnostics for pack layouts and configuration."""

from .checklist import ChecklistIssue, run_checklist
from .odds_simulator import RareSlotSimulator, SimulationResult

__all__ = [
    "ChecklistIssue",
    "run_checklist",
    "RareSlotSimulator",
    "SimulationResult",
]
