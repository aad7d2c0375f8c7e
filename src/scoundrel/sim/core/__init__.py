"""Core simulation primitives for the Scoundrel dungeon."""

from scoundrel.sim.core.game_state import (
    MAX_HP,
    ROOM_INTERACTIONS,
    TABLE_SIZE,
    DungeonState,
    is_dead,
    is_win,
    make_initial_state,
)
from scoundrel.sim.core.piles import DrawPile
from scoundrel.sim.core.state_key import (
    StateKey,
    decode_card,
    encode_card,
    format_state_key,
    state_key,
)

__all__ = [
    # piles
    "DrawPile",
    # game_state
    "MAX_HP",
    "ROOM_INTERACTIONS",
    "TABLE_SIZE",
    "DungeonState",
    "is_dead",
    "is_win",
    "make_initial_state",
    # state_key
    "StateKey",
    "decode_card",
    "encode_card",
    "format_state_key",
    "state_key",
]
