"""Card model for the Scoundrel dungeon.

Re-exports the card types and helpers so consumers can do::

    from scoundrel.ir import Card, Suit, CardRole, parse_card
"""

from .cards import (
    MAX_RANK,
    MIN_RANK,
    SPECIAL_RANK,
    Card,
    CardRole,
    Suit,
    card_text,
    filter_deck_for_mode,
    is_enemy,
    parse_card,
    parse_deck,
    rank_label,
    role_of,
)

__all__ = [
    "MAX_RANK",
    "MIN_RANK",
    "SPECIAL_RANK",
    "Card",
    "CardRole",
    "Suit",
    "card_text",
    "filter_deck_for_mode",
    "is_enemy",
    "parse_card",
    "parse_deck",
    "rank_label",
    "role_of",
]
