"""Damage calculation and application.

Enemies hit for their rank.  A weapon absorbs up to its own rank of
that damage, floored at 0.  HP never drops below 0.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from scoundrel.sim.core.game_state import DungeonState


def calculate_damage(enemy_rank: int, weapon_rank: int = 0) -> int:
    """Damage taken from an enemy of *enemy_rank*.

    Pass ``weapon_rank=0`` for a bare-handed fight.
    """
    return max(0, enemy_rank - weapon_rank)


def take_damage(state: DungeonState, amount: int) -> int:
    """Subtract *amount* from the player's HP (floored at 0).

    Returns the HP actually lost.
    """
    if amount <= 0:
        return 0
    hp_lost = min(state.hp, amount)
    state.hp -= hp_lost
    return hp_lost
