"""Weapon handling: equipping, the kill stack, and repair toolkits."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from scoundrel.sim.core.game_state import DungeonState


def can_use_weapon(state: DungeonState, enemy_rank: int) -> bool:
    """Whether the equipped weapon may be used on an enemy of *enemy_rank*.

    Each weapon kill must be strictly lower in rank than the previous
    one.  A fresh weapon may be used on anything.
    """
    if state.weapon_rank <= 0:
        return False
    if not state.weapon_kills:
        return True
    return enemy_rank < state.weapon_kills[-1]


def equip_weapon(state: DungeonState, weapon_rank: int) -> None:
    """Equip a new weapon, discarding the old one and its kill stack."""
    state.weapon_rank = weapon_rank
    state.weapon_kills = []


def record_kill(state: DungeonState, enemy_rank: int) -> None:
    state.weapon_kills.append(enemy_rank)


def repair_weapon(state: DungeonState) -> int | None:
    """Remove the most recent kill from the weapon's stack.

    Returns the removed rank, or ``None`` when there was nothing to
    repair (no weapon, or an unused one).
    """
    if state.weapon_rank > 0 and state.weapon_kills:
        return state.weapon_kills.pop()
    return None
