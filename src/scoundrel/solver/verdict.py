"""Solver verdicts.

A verdict is one of three things:

- ``clearable=True``: a winning line exists (``path`` holds it when
  requested).
- ``clearable=False``: the search was exhaustive and proved that no line
  wins.
- ``clearable=None``: the search stopped early (``reason`` says why).
  This is *not* a proof that the deck is unclearable.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from scoundrel.sim.actions import Action
from scoundrel.solver.telemetry import SearchTelemetry


class StopReason(str, Enum):
    """Why a search ended without an exhaustive answer, or ended trivially."""

    TIME_LIMIT = "time_limit"
    NODE_LIMIT = "node_limit"
    CANCELLED = "cancelled"
    DEAD_START = "dead_start"


class Verdict(BaseModel):
    """Result of solving one deck."""

    clearable: bool | None
    reason: StopReason | None = None
    path: list[Action] | None = None
    """Winning actions in order, when ``return_path`` was requested."""

    nodes: int = 0
    elapsed_ms: float = 0.0
    telemetry: SearchTelemetry = Field(default_factory=SearchTelemetry)

    @property
    def is_clearable(self) -> bool:
        return self.clearable is True

    @property
    def is_unclearable(self) -> bool:
        return self.clearable is False

    @property
    def is_indeterminate(self) -> bool:
        return self.clearable is None
