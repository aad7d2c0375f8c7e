"""Card definitions -- the only content type in a Scoundrel dungeon.

A Scoundrel deck is a standard 52-card deck.  Every card plays exactly
one role in the dungeon, and that role is a pure function of its suit
and rank:

- Clubs / Spades: enemies (damage equal to rank).
- Diamonds 2-10: weapons.  Diamonds J-A: repair toolkits.
- Hearts 2-10: healing potions.  Hearts J-A: poison potions.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Iterable

from pydantic import BaseModel, Field


MIN_RANK = 2
MAX_RANK = 14
SPECIAL_RANK = 11
"""Hearts and Diamonds at or above this rank are the "special" cards
(toolkits and poison) that classic mode removes."""


class Suit(str, Enum):
    """The four French suits."""

    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"

    @property
    def symbol(self) -> str:
        return SUIT_SYMBOLS[self]


class CardRole(str, Enum):
    """What a card does when the player interacts with it."""

    ENEMY = "ENEMY"
    WEAPON = "WEAPON"
    REPAIR_TOOLKIT = "REPAIR_TOOLKIT"
    HEALING_POTION = "HEALING_POTION"
    POISON_POTION = "POISON_POTION"


SUIT_SYMBOLS: dict[Suit, str] = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "◆",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
}

# Accepted suit spellings when parsing card text.  Both diamond glyphs
# are in circulation, and ASCII letters make decks easy to type.
_SUIT_ALIASES: dict[str, Suit] = {
    "♥": Suit.HEARTS,
    "H": Suit.HEARTS,
    "◆": Suit.DIAMONDS,
    "♦": Suit.DIAMONDS,
    "D": Suit.DIAMONDS,
    "♣": Suit.CLUBS,
    "C": Suit.CLUBS,
    "♠": Suit.SPADES,
    "S": Suit.SPADES,
}

_FACE_RANKS: dict[str, int] = {"J": 11, "Q": 12, "K": 13, "A": 14}
_PIP_RANK = re.compile(r"[2-9]|10")
_RANK_LABELS: dict[int, str] = {v: k for k, v in _FACE_RANKS.items()}


# ---------------------------------------------------------------------------
# Card
# ---------------------------------------------------------------------------

class Card(BaseModel):
    """A single playing card.  Immutable and hashable."""

    model_config = {"frozen": True}

    suit: Suit
    rank: int = Field(ge=MIN_RANK, le=MAX_RANK, strict=True)
    """2-10 for pip cards, 11=J, 12=Q, 13=K, 14=A."""

    @property
    def role(self) -> CardRole:
        return role_of(self)

    @property
    def is_special(self) -> bool:
        """True for the toolkits and poison potions removed in classic mode."""
        return (
            self.suit in (Suit.HEARTS, Suit.DIAMONDS)
            and self.rank >= SPECIAL_RANK
        )

    def __str__(self) -> str:
        return card_text(self)


# ---------------------------------------------------------------------------
# Roles
# ---------------------------------------------------------------------------

def role_of(card: Card) -> CardRole:
    """Classify *card* into its single dungeon role."""
    suit = card.suit
    if suit is Suit.CLUBS or suit is Suit.SPADES:
        return CardRole.ENEMY
    if suit is Suit.DIAMONDS:
        if card.rank < SPECIAL_RANK:
            return CardRole.WEAPON
        return CardRole.REPAIR_TOOLKIT
    if card.rank < SPECIAL_RANK:
        return CardRole.HEALING_POTION
    return CardRole.POISON_POTION


def is_enemy(card: Card) -> bool:
    return card.suit is Suit.CLUBS or card.suit is Suit.SPADES


def filter_deck_for_mode(
    cards: Iterable[Card],
    include_special_cards: bool = True,
) -> list[Card]:
    """Return the cards that take part in a game of the given mode.

    Classic mode (``include_special_cards=False``) drops the J/Q/K/A of
    Hearts and Diamonds.  Enemies are never filtered.  Order is kept.
    """
    if include_special_cards:
        return list(cards)
    return [c for c in cards if not c.is_special]


# ---------------------------------------------------------------------------
# Text form
# ---------------------------------------------------------------------------

def rank_label(rank: int) -> str:
    """``"A"``, ``"K"``, ``"Q"``, ``"J"`` or the rank's digits."""
    return _RANK_LABELS.get(rank, str(rank))


def card_text(card: Card) -> str:
    """Render *card* the way the game prints it, e.g. ``"10♠"``."""
    return f"{rank_label(card.rank)}{card.suit.symbol}"


def parse_card(text: str) -> Card:
    """Parse a card from its text form.

    Accepts the game's glyphs (``"10♠"``, ``"A♣"``, ``"K◆"``, ``"K♦"``,
    ``"Q♥"``) as well as ASCII suit letters (``"10S"``, ``"qh"``).

    Raises
    ------
    ValueError
        If the suit or rank is not recognised.  Nothing is coerced.
    """
    s = str(text).strip()
    if len(s) < 2:
        raise ValueError(f"Card text too short: {text!r}")

    suit = _SUIT_ALIASES.get(s[-1].upper())
    if suit is None:
        raise ValueError(f"Unknown suit in card: {text!r}")

    rank_part = s[:-1].upper()
    if rank_part in _FACE_RANKS:
        rank = _FACE_RANKS[rank_part]
    elif _PIP_RANK.fullmatch(rank_part):
        rank = int(rank_part)
    else:
        raise ValueError(f"Unknown rank in card: {text!r}")

    return Card(suit=suit, rank=rank)


def parse_deck(text: str) -> list[Card]:
    """Parse a whitespace- or comma-separated list of cards.

    The order is kept as written: the **last** card is the top of the
    deck.
    """
    tokens = [t for t in re.split(r"[\s,]+", text) if t]
    return [parse_card(t) for t in tokens]
