"""Exhaustive dungeon search -- decides whether a deck can be cleared.

The search is an iterative depth-first walk over the action tree with an
explicit frame stack, so deep games never hit the recursion limit and
the walk can be paused between any two iterations.

Architecture:
    DungeonSearch owns all per-solve state (frame stack, visited set,
    parent map, counters).  ``step(n)`` runs at most *n* loop iterations
    and returns a ``Verdict`` once the search has finished, or ``None``
    when there is more to do.  ``solve`` simply steps until done; the
    cooperative drivers in ``scoundrel.solver.cooperative`` step in
    batches and hand control back to the host in between.

    Each iteration looks at the top frame:
        1. On first visit, drop it if its key was already visited;
           otherwise mark it visited and enumerate its actions.
        2. If its actions are exhausted, pop it (backtrack).
        3. Otherwise apply the next action.  A win ends the search;
           deaths, illegal results and already-visited children are
           skipped; anything else is pushed.

    Reaching an equivalent state by a different move order is common
    (e.g. equipping before or after drinking a potion), so the visited
    set is what keeps the search tractable.
"""

from __future__ import annotations

import logging
import time
from typing import Iterable

from scoundrel.ir.cards import Card
from scoundrel.sim.actions import Action, enumerate_actions
from scoundrel.sim.core.game_state import (
    DungeonState,
    is_dead,
    is_win,
    make_initial_state,
)
from scoundrel.sim.core.state_key import StateKey, format_state_key, state_key
from scoundrel.sim.transitions import Terminal, apply_action
from scoundrel.solver.config import SolverOptions, resolve_options
from scoundrel.solver.telemetry import SearchTelemetry
from scoundrel.solver.verdict import StopReason, Verdict

logger = logging.getLogger(__name__)

# (clearable, reason, path) -- a finished search before it becomes a Verdict.
_Outcome = tuple[bool | None, StopReason | None, list[Action] | None]


class _Frame:
    """One level of the DFS stack."""

    __slots__ = ("state", "key", "actions", "index")

    def __init__(self, state: DungeonState, key: StateKey) -> None:
        self.state = state
        self.key = key
        self.actions: list[Action] | None = None
        self.index = 0


# =====================================================================
# DungeonSearch
# =====================================================================

class DungeonSearch:
    """A single, resumable solve of one deck.

    Parameters
    ----------
    deck:
        The shuffled deck, bottom to top (the last card is drawn first).
    options:
        Budgets and rule switches.  Keyword *overrides* are applied on
        top.

    Instances are not shared between solves and are not thread-safe;
    several searches may be interleaved freely because none of them
    touches another's state.
    """

    def __init__(
        self,
        deck: Iterable[Card],
        options: SolverOptions | None = None,
        **overrides,
    ) -> None:
        self.options = resolve_options(options, **overrides)
        self.telemetry = SearchTelemetry()

        self._verdict: Verdict | None = None
        self._nodes = 0
        self._started_at: float | None = None
        self._deadline: float | None = None
        self._visited: set[StateKey] = set()
        self._parents: dict[StateKey, tuple[StateKey, Action] | None] | None = (
            {} if self.options.return_path else None
        )
        self._stack: list[_Frame] = []

        opts = self.options
        initial = make_initial_state(
            deck,
            include_special_cards=opts.include_special_cards,
            starting_hp=opts.starting_hp,
        )
        logger.debug(
            "Solving deck of %d cards (max_nodes=%d, time_limit_ms=%s, return_path=%s)",
            initial.card_count,
            opts.max_nodes,
            opts.time_limit_ms,
            opts.return_path,
        )

        if is_dead(initial):
            self._conclude((False, StopReason.DEAD_START, None))
        elif is_win(initial):
            self._conclude((True, None, [] if opts.return_path else None))
        else:
            root = _Frame(initial, state_key(initial))
            self._stack.append(root)
            if self._parents is not None:
                self._parents[root.key] = None

    # -- public API ----------------------------------------------------------

    @property
    def verdict(self) -> Verdict | None:
        """The final verdict, or ``None`` while the search is unfinished."""
        return self._verdict

    @property
    def done(self) -> bool:
        return self._verdict is not None

    @property
    def nodes(self) -> int:
        return self._nodes

    def step(self, max_iterations: int | None = None) -> Verdict | None:
        """Advance the search by up to *max_iterations* loop iterations.

        Returns the verdict once the search is over (and on every later
        call), or ``None`` if it should be stepped again.
        """
        if self._verdict is not None:
            return self._verdict

        now = time.perf_counter()
        if self._started_at is None:
            self._started_at = now
            if self.options.time_limit_ms is not None:
                self._deadline = now + self.options.time_limit_ms / 1000.0

        outcome = self._run(max_iterations)

        self.telemetry.batches += 1
        self.telemetry.elapsed_ms += (time.perf_counter() - now) * 1000.0
        if outcome is None:
            return None
        return self._conclude(outcome)

    def run(self) -> Verdict:
        """Step until the search finishes."""
        verdict = self.step()
        if verdict is None:
            raise RuntimeError("Unbounded step returned without a verdict")
        return verdict

    def cancel(self) -> Verdict:
        """Stop the search now with an indeterminate ``cancelled`` verdict.

        Has no effect on a search that has already finished.
        """
        if self._verdict is None:
            logger.debug("Search cancelled after %d nodes", self._nodes)
            self._conclude((None, StopReason.CANCELLED, None))
        return self._verdict

    # -- search loop ---------------------------------------------------------

    def _run(self, max_iterations: int | None) -> _Outcome | None:
        stack = self._stack
        visited = self._visited
        parents = self._parents
        telemetry = self.telemetry
        max_nodes = self.options.max_nodes
        deadline = self._deadline
        iterations = 0

        while stack:
            if max_iterations is not None and iterations >= max_iterations:
                return None
            iterations += 1

            if deadline is not None and time.perf_counter() >= deadline:
                logger.debug("Time limit reached after %d nodes", self._nodes)
                return (None, StopReason.TIME_LIMIT, None)
            expanded = self._nodes
            self._nodes += 1
            telemetry.nodes = self._nodes
            if expanded > max_nodes:
                logger.debug("Node limit of %d reached", max_nodes)
                return (None, StopReason.NODE_LIMIT, None)

            frame = stack[-1]

            if frame.actions is None:
                if frame.key in visited:
                    telemetry.duplicate_prunes += 1
                    stack.pop()
                    continue
                visited.add(frame.key)
                telemetry.states_visited += 1

                if is_dead(frame.state):
                    stack.pop()
                    continue
                if is_win(frame.state):
                    return (True, None, self._path_to(frame.key))

                frame.actions = enumerate_actions(frame.state)

            if frame.index >= len(frame.actions):
                stack.pop()
                continue

            action = frame.actions[frame.index]
            frame.index += 1
            out = apply_action(frame.state, action)

            if out.terminal is Terminal.WIN:
                return (True, None, self._path_to(frame.key, action))
            if out.state is None:
                if out.terminal is Terminal.DEAD:
                    telemetry.dead_ends += 1
                continue

            child_key = state_key(out.state)
            if child_key in visited:
                telemetry.duplicate_prunes += 1
                continue

            stack.append(_Frame(out.state, child_key))
            if len(stack) > telemetry.max_depth:
                telemetry.max_depth = len(stack)
            if parents is not None and child_key not in parents:
                parents[child_key] = (frame.key, action)

        return (False, None, None)

    # -- helpers -------------------------------------------------------------

    def _path_to(
        self,
        key: StateKey,
        final_action: Action | None = None,
    ) -> list[Action] | None:
        """Walk the parent map from *key* back to the root."""
        if self._parents is None:
            return None
        path: list[Action] = [] if final_action is None else [final_action]
        link = self._parents.get(key)
        while link is not None:
            key, action = link
            path.append(action)
            link = self._parents.get(key)
        path.reverse()
        logger.debug(
            "Reconstructed winning path of %d actions from root %s",
            len(path),
            format_state_key(key),
        )
        return path

    def _conclude(self, outcome: _Outcome) -> Verdict:
        clearable, reason, path = outcome
        elapsed_ms = 0.0
        if self._started_at is not None:
            elapsed_ms = (time.perf_counter() - self._started_at) * 1000.0
        self._verdict = Verdict(
            clearable=clearable,
            reason=reason,
            path=path,
            nodes=self._nodes,
            elapsed_ms=elapsed_ms,
            telemetry=self.telemetry,
        )
        logger.debug(
            "Search finished: clearable=%s reason=%s nodes=%d elapsed=%.1fms",
            clearable,
            reason.value if reason is not None else None,
            self._nodes,
            elapsed_ms,
        )
        # Release the search tree; only the verdict is needed from here on.
        self._stack.clear()
        self._visited.clear()
        self._parents = None
        return self._verdict


# =====================================================================
# Convenience entry point
# =====================================================================

def solve(
    deck: Iterable[Card],
    options: SolverOptions | None = None,
    **overrides,
) -> Verdict:
    """Decide whether *deck* can be cleared.

    Usage::

        verdict = solve(deck, include_special_cards=False, return_path=True)
        if verdict.is_clearable:
            print(verdict.path)
    """
    return DungeonSearch(deck, options, **overrides).run()
