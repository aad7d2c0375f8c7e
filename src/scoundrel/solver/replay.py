"""Replay an action sequence against a deck and score the result.

Used to check a path returned by the solver, or any line of play
supplied by a caller, and to report how the game ended.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from scoundrel.ir.cards import Card, is_enemy
from scoundrel.sim.actions import Action, ActionKind
from scoundrel.sim.core.game_state import (
    DungeonState,
    is_dead,
    is_win,
    make_initial_state,
)
from scoundrel.sim.mechanics.damage import calculate_damage
from scoundrel.sim.scoring import clear_score, death_score
from scoundrel.sim.transitions import Terminal, apply_action
from scoundrel.solver.config import SolverOptions, resolve_options

logger = logging.getLogger(__name__)


class IllegalActionError(ValueError):
    """An action in a replayed path is not legal at its position."""

    def __init__(self, step: int, action: Action, reason: str) -> None:
        self.step = step
        self.action = action
        super().__init__(f"Step {step} ({action}): {reason}")


@dataclass
class ReplayResult:
    """How a replayed game ended.

    Attributes
    ----------
    outcome:
        ``"win"``, ``"dead"`` or ``"in_progress"``.
    final_state:
        The state after the last action, or ``None`` once terminal.
    hp:
        Player HP at the end (``0`` on death).
    bonus:
        Last-card healing bonus (``0`` unless the game was won that way).
    score:
        Final score, or ``None`` while the game is still in progress.
    steps:
        Number of actions applied.
    """

    outcome: str
    final_state: DungeonState | None
    hp: int
    bonus: int = 0
    score: int | None = None
    steps: int = 0


def _death_score(parent: DungeonState, action: Action) -> int:
    """Score a death caused by *action* taken in *parent*.

    An enemy that deals exactly the player's remaining HP is still
    slain (it falls with the player), so it no longer counts against
    the score; one that overkills survives and does.
    """
    score = death_score(parent)
    if action.kind in (ActionKind.FIGHT_FIST, ActionKind.FIGHT_WEAPON):
        card = parent.table[action.slot]
        weapon_rank = parent.weapon_rank if action.kind is ActionKind.FIGHT_WEAPON else 0
        if card is not None and is_enemy(card):
            if calculate_damage(card.rank, weapon_rank) == parent.hp:
                score += card.rank
    return score


def replay_path(
    deck: Iterable[Card],
    actions: Sequence[Action],
    options: SolverOptions | None = None,
    **overrides,
) -> ReplayResult:
    """Apply *actions* in order, starting from *deck*'s opening state.

    Only ``include_special_cards`` and ``starting_hp`` are taken from
    the options.

    Raises
    ------
    IllegalActionError
        If an action is not legal where it is played, or if actions
        remain after the game has ended.
    """
    opts = resolve_options(options, **overrides)
    state = make_initial_state(
        deck,
        include_special_cards=opts.include_special_cards,
        starting_hp=opts.starting_hp,
    )

    if is_win(state) or is_dead(state):
        if actions:
            raise IllegalActionError(0, actions[0], "the game is already over")
        if is_win(state):
            return ReplayResult(
                outcome="win", final_state=None, hp=state.hp,
                score=clear_score(state.hp),
            )
        return ReplayResult(
            outcome="dead", final_state=None, hp=0, score=death_score(state),
        )

    for i, action in enumerate(actions):
        out = apply_action(state, action)
        if out.is_invalid:
            raise IllegalActionError(i, action, "not a legal action in this state")

        if out.is_terminal:
            if i != len(actions) - 1:
                raise IllegalActionError(
                    i + 1, actions[i + 1], "the game is already over"
                )
            if out.terminal is Terminal.WIN:
                return ReplayResult(
                    outcome="win",
                    final_state=None,
                    hp=out.hp,
                    bonus=out.bonus,
                    score=clear_score(out.hp, out.bonus),
                    steps=i + 1,
                )
            return ReplayResult(
                outcome="dead",
                final_state=None,
                hp=0,
                score=_death_score(state, action),
                steps=i + 1,
            )
        state = out.state

    logger.warning(
        "Replayed %d actions without reaching the end of the dungeon", len(actions)
    )
    return ReplayResult(
        outcome="in_progress",
        final_state=state,
        hp=state.hp,
        steps=len(actions),
    )
