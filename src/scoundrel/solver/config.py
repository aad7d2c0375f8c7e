"""Solver configuration.

All options are explicit and owned by the caller; there is no global
configuration.  ``resolve_options`` merges an options object with
keyword overrides and re-validates the result.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from scoundrel.sim.core.game_state import MAX_HP


class SolverOptions(BaseModel):
    """Budgets and rule switches for a single solve."""

    model_config = {"extra": "forbid"}

    include_special_cards: bool = True
    """Keep the J/Q/K/A of Hearts and Diamonds (toolkits and poison)."""

    starting_hp: int = Field(default=MAX_HP, ge=0, le=MAX_HP)

    max_nodes: int = Field(default=500_000, ge=0)
    """Search loop iterations allowed before giving up with ``node_limit``."""

    return_path: bool = False
    """Reconstruct the winning action sequence."""

    time_limit_ms: float | None = Field(default=None, gt=0)
    """Wall-clock budget, or ``None`` for no limit (and no clock reads)."""

    yield_every: int = Field(default=2_000, ge=1)
    """Loop iterations per cooperative batch between yields."""


def resolve_options(
    options: SolverOptions | None = None,
    **overrides: Any,
) -> SolverOptions:
    """Combine *options* with keyword *overrides* (overrides win)."""
    base = options if options is not None else SolverOptions()
    if not overrides:
        return base
    # model_copy skips validation, so round-trip through the constructor.
    return SolverOptions(**{**base.model_dump(), **overrides})
