"""Core dungeon mechanics for the Scoundrel simulator.

The rule functions below mutate a ``DungeonState`` in place; the
transition engine calls them on a private copy.

Usage::

    from scoundrel.sim.mechanics import (
        calculate_damage, take_damage,
        can_use_weapon, equip_weapon, record_kill, repair_weapon,
        heal, drink_poison,
        can_flee, flee_room, finish_interaction,
    )
"""

# -- damage ------------------------------------------------------------------
from .damage import calculate_damage, take_damage

# -- weapons -----------------------------------------------------------------
from .weapons import can_use_weapon, equip_weapon, record_kill, repair_weapon

# -- potions -----------------------------------------------------------------
from .potions import POISON_DAMAGE, drink_poison, heal

# -- rooms -------------------------------------------------------------------
from .rooms import can_flee, finish_interaction, flee_room

__all__ = [
    # damage
    "calculate_damage",
    "take_damage",
    # weapons
    "can_use_weapon",
    "equip_weapon",
    "record_kill",
    "repair_weapon",
    # potions
    "POISON_DAMAGE",
    "heal",
    "drink_poison",
    # rooms
    "can_flee",
    "flee_room",
    "finish_interaction",
]
