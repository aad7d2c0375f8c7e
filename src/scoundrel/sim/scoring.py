"""Final score of a finished game.

- Cleared: remaining HP plus the last-card healing bonus.
- Died: minus the total rank of every enemy left in the dungeon.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from scoundrel.sim.core.game_state import DungeonState


def clear_score(hp: int, bonus: int = 0) -> int:
    return hp + bonus


def remaining_enemy_rank_sum(state: DungeonState) -> int:
    """Sum of ranks of the enemies still in the deck or on the table."""
    return sum(card.rank for card in state.enemy_cards())


def death_score(state: DungeonState) -> int:
    """Score for dying with *state*'s cards still in play."""
    return -remaining_enemy_rank_sum(state)
