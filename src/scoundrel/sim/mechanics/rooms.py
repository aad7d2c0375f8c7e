"""Room lifecycle: fleeing, and advancing to the next room.

A room is the four-card table.  It ends after ``ROOM_INTERACTIONS``
resolved cards (the last card carries over), or earlier if the table
runs dry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from scoundrel.sim.core.game_state import ROOM_INTERACTIONS, TABLE_SIZE

if TYPE_CHECKING:
    from scoundrel.sim.core.game_state import DungeonState


def can_flee(state: DungeonState) -> bool:
    """Flee is allowed only before touching any card in the room, never
    in two rooms in a row, and only when there is something to flee."""
    return (
        state.interactions_this_room == 0
        and not state.fled_last_room
        and state.has_table_cards
    )


def flee_room(state: DungeonState) -> None:
    """Put the room's cards under the deck and deal a fresh room.

    Cards go back last slot first, so slot 0 ends up at the very bottom.
    """
    for i in range(TABLE_SIZE - 1, -1, -1):
        card = state.table[i]
        if card is not None:
            state.deck.return_to_bottom(card)
    state.deal_room()
    state.reset_room_counters()
    state.fled_last_room = True


def finish_interaction(state: DungeonState) -> bool:
    """Book-keeping after a card has been resolved.

    Returns ``True`` if that was the last card in the dungeon (the
    player cleared it).  Otherwise the room may advance: every empty
    slot is refilled from the deck top and the per-room counters reset.
    """
    state.interactions_this_room += 1

    if state.deck.is_empty and not state.has_table_cards:
        return True

    if (
        state.interactions_this_room >= ROOM_INTERACTIONS
        or not state.has_table_cards
    ):
        state.refill_table()
        state.reset_room_counters()
        state.fled_last_room = False

    return False
