"""Dungeon solver -- decides whether a shuffled deck can be cleared.

Usage::

    from scoundrel.ir import parse_deck
    from scoundrel.solver import solve

    verdict = solve(parse_deck("2◆ 5♠ 3♥ 9♣"), return_path=True)
    verdict.clearable   # True, False, or None if the budget ran out
"""

from .config import SolverOptions, resolve_options
from .cooperative import CancellationToken, CooperativeSolver, solve_async
from .replay import IllegalActionError, ReplayResult, replay_path
from .search import DungeonSearch, solve
from .telemetry import SearchTelemetry
from .verdict import StopReason, Verdict

__all__ = [
    # config
    "SolverOptions",
    "resolve_options",
    # search
    "DungeonSearch",
    "solve",
    # cooperative
    "CancellationToken",
    "CooperativeSolver",
    "solve_async",
    # replay
    "IllegalActionError",
    "ReplayResult",
    "replay_path",
    # results
    "SearchTelemetry",
    "StopReason",
    "Verdict",
]
