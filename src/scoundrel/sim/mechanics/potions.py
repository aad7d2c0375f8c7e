"""Potion effects -- healing and poison."""

from __future__ import annotations

from typing import TYPE_CHECKING

from scoundrel.sim.core.game_state import MAX_HP
from scoundrel.sim.mechanics.damage import take_damage

if TYPE_CHECKING:
    from scoundrel.sim.core.game_state import DungeonState

POISON_DAMAGE = 10


def heal(state: DungeonState, amount: int) -> int:
    """Heal *amount* HP, capped at ``MAX_HP``.  Returns the HP gained."""
    if amount <= 0:
        return 0
    before = state.hp
    state.hp = min(MAX_HP, state.hp + amount)
    return state.hp - before


def drink_poison(state: DungeonState) -> int:
    """Apply a poison potion.  Returns the HP lost."""
    return take_damage(state, POISON_DAMAGE)
