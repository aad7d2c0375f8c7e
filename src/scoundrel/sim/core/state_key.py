"""Canonical memoization keys for dungeon states.

Cards are packed into small integers here, and only here.  The packing
``suit_index * 16 + rank`` (Hearts=0, Diamonds=1, Clubs=2, Spades=3) is a
bijection between the 52 cards and a subset of ``2..62``; ``0`` stands
for "no card".  Rank never reaches 16, so suit and rank never bleed into
each other.

A state key is a nested tuple.  Tuples carry their own boundaries, so
two states share a key exactly when every tracked field is equal.
"""

from __future__ import annotations

from typing import Tuple

from scoundrel.ir.cards import MAX_RANK, MIN_RANK, Card, Suit
from scoundrel.sim.core.game_state import DungeonState

StateKey = Tuple[
    int, int, bool, int, bool,
    Tuple[int, ...], Tuple[int, ...], Tuple[int, ...],
]

_SUIT_ORDER: tuple[Suit, ...] = (
    Suit.HEARTS,
    Suit.DIAMONDS,
    Suit.CLUBS,
    Suit.SPADES,
)
_SUIT_INDEX: dict[Suit, int] = {s: i for i, s in enumerate(_SUIT_ORDER)}
_SUIT_STRIDE = 16

# Every code the bijection can produce, pre-decoded.
_DECODED: dict[int, Card] = {
    i * _SUIT_STRIDE + rank: Card(suit=suit, rank=rank)
    for i, suit in enumerate(_SUIT_ORDER)
    for rank in range(MIN_RANK, MAX_RANK + 1)
}


def encode_card(card: Card | None) -> int:
    """Pack *card* into its key code (``0`` for an empty slot)."""
    if card is None:
        return 0
    return _SUIT_INDEX[card.suit] * _SUIT_STRIDE + card.rank


def decode_card(code: int) -> Card | None:
    """Inverse of :func:`encode_card`.

    Raises ``ValueError`` for codes the bijection never produces.
    """
    if code == 0:
        return None
    try:
        return _DECODED[code]
    except KeyError:
        raise ValueError(f"Not a valid card code: {code!r}") from None


def state_key(state: DungeonState) -> StateKey:
    """Canonical, hashable key for *state*.

    The deck is encoded bottom to top, so draw order is part of the key.
    """
    return (
        state.hp,
        state.weapon_rank,
        state.potion_used_this_room,
        state.interactions_this_room,
        state.fled_last_room,
        tuple(state.weapon_kills),
        tuple(encode_card(c) for c in state.table),
        tuple(encode_card(c) for c in state.deck),
    )


def format_state_key(key: StateKey) -> str:
    """Compact one-line rendering of *key* for log output."""
    hp, weapon, potion, interactions, fled, kills, table, deck = key
    return ":".join(
        [
            str(hp),
            str(weapon),
            "1" if potion else "0",
            str(interactions),
            "1" if fled else "0",
            ".".join(str(k) for k in kills),
            "|",
            ",".join(str(c) for c in table),
            "|",
            ",".join(str(c) for c in deck),
        ]
    )
