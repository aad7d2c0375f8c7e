"""Dungeon state for a headless Scoundrel simulator.

Houses the complete state of a game in progress (``DungeonState``) and
the construction and terminal checks used by both the transition engine
and the solver.

``DungeonState`` is a plain ``dataclass`` rather than a Pydantic model:
the solver creates one per search node, so construction and copying
must stay cheap.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from scoundrel.ir.cards import Card, filter_deck_for_mode, is_enemy
from scoundrel.sim.core.piles import DrawPile

MAX_HP = 20
TABLE_SIZE = 4
ROOM_INTERACTIONS = 3
"""Interactions after which the room is refilled (the 4th card carries over)."""


def _empty_table() -> list[Card | None]:
    return [None] * TABLE_SIZE


# ---------------------------------------------------------------------------
# DungeonState
# ---------------------------------------------------------------------------

@dataclass
class DungeonState:
    """Full state of a Scoundrel game between two player decisions.

    Instances are treated as value snapshots: the transition engine
    works on ``copy()`` and never mutates a state it was handed.
    """

    hp: int = MAX_HP
    deck: DrawPile = field(default_factory=DrawPile)
    table: list[Card | None] = field(default_factory=_empty_table)
    """Exactly ``TABLE_SIZE`` slots.  ``None`` means the slot is empty."""

    weapon_rank: int = 0
    """Rank of the equipped weapon, or ``0`` when bare-handed."""

    weapon_kills: list[int] = field(default_factory=list)
    """Ranks of enemies slain with the current weapon, most recent last."""

    potion_used_this_room: bool = False
    interactions_this_room: int = 0
    fled_last_room: bool = False

    # -- queries -------------------------------------------------------------

    @property
    def has_table_cards(self) -> bool:
        for card in self.table:
            if card is not None:
                return True
        return False

    @property
    def card_count(self) -> int:
        """Cards still in play (deck plus table)."""
        return len(self.deck) + sum(1 for c in self.table if c is not None)

    @property
    def last_kill(self) -> int | None:
        return self.weapon_kills[-1] if self.weapon_kills else None

    def occupied_slots(self) -> list[int]:
        return [i for i, c in enumerate(self.table) if c is not None]

    def enemy_cards(self) -> list[Card]:
        """Every enemy still in the deck or on the table."""
        in_play = list(self.deck) + [c for c in self.table if c is not None]
        return [c for c in in_play if is_enemy(c)]

    # -- copying -------------------------------------------------------------

    def copy(self) -> DungeonState:
        """Return a private copy safe to mutate.  Cards are shared."""
        return DungeonState(
            hp=self.hp,
            deck=self.deck.copy(),
            table=list(self.table),
            weapon_rank=self.weapon_rank,
            weapon_kills=list(self.weapon_kills),
            potion_used_this_room=self.potion_used_this_room,
            interactions_this_room=self.interactions_this_room,
            fled_last_room=self.fled_last_room,
        )

    # -- room helpers --------------------------------------------------------

    def deal_room(self) -> None:
        """Replace the whole table with up to four cards from the deck top."""
        self.table = [self.deck.draw_top() for _ in range(TABLE_SIZE)]

    def refill_table(self) -> None:
        """Fill every empty slot, in slot order, while the deck lasts."""
        for i in range(TABLE_SIZE):
            if self.table[i] is None and not self.deck.is_empty:
                self.table[i] = self.deck.draw_top()

    def reset_room_counters(self) -> None:
        self.interactions_this_room = 0
        self.potion_used_this_room = False


# ---------------------------------------------------------------------------
# Construction and terminal checks
# ---------------------------------------------------------------------------

def make_initial_state(
    deck: Iterable[Card],
    include_special_cards: bool = True,
    starting_hp: int = MAX_HP,
) -> DungeonState:
    """Build the opening state for *deck*.

    *deck* is ordered bottom to top (its last card is drawn first).  In
    classic mode the special Hearts/Diamonds are removed before the
    first room is dealt.
    """
    pile = DrawPile(filter_deck_for_mode(deck, include_special_cards))
    state = DungeonState(hp=starting_hp, deck=pile)
    state.deal_room()
    return state


def is_win(state: DungeonState) -> bool:
    return state.hp > 0 and state.deck.is_empty and not state.has_table_cards


def is_dead(state: DungeonState) -> bool:
    return state.hp <= 0
