"""Draw pile for the Scoundrel dungeon.

The dungeon deck is drawn from the top and refilled at the bottom when
the player flees a room, so it is modelled as a double-ended queue with
named operations instead of raw end manipulation.
"""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator

from scoundrel.ir.cards import Card


class DrawPile:
    """Ordered pile of cards with a top (draw end) and a bottom.

    Cards are given and iterated **bottom to top**, so the last card of
    the sequence passed in is the first one drawn.

    This is a plain Python class (not a Pydantic model) because it is
    copied and mutated once per search node.
    """

    __slots__ = ("_cards",)

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: deque[Card] = deque(cards)

    # -- mutations -----------------------------------------------------------

    def draw_top(self) -> Card | None:
        """Remove and return the top card, or ``None`` if the pile is empty."""
        if self._cards:
            return self._cards.pop()
        return None

    def return_to_bottom(self, card: Card) -> None:
        """Place *card* underneath every card already in the pile."""
        self._cards.appendleft(card)

    def copy(self) -> DrawPile:
        clone = DrawPile.__new__(DrawPile)
        clone._cards = self._cards.copy()
        return clone

    # -- queries -------------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return not self._cards

    @property
    def top(self) -> Card | None:
        """Peek at the next card to be drawn."""
        return self._cards[-1] if self._cards else None

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DrawPile):
            return NotImplemented
        return self._cards == other._cards

    def __repr__(self) -> str:
        return f"DrawPile(size={len(self._cards)})"
