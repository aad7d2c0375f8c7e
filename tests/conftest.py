"""Shared fixtures and helpers for Scoundrel tests."""

from __future__ import annotations

import random
from typing import Iterator

import pytest

from scoundrel.ir.cards import MAX_RANK, MIN_RANK, Card, Suit, parse_card, parse_deck
from scoundrel.sim.actions import enumerate_actions
from scoundrel.sim.core.game_state import DungeonState, is_win
from scoundrel.sim.core.piles import DrawPile
from scoundrel.sim.transitions import Terminal, apply_action


def c(text: str) -> Card:
    """Shorthand for ``parse_card``."""
    return parse_card(text)


def cards(text: str) -> list[Card]:
    """Shorthand for ``parse_deck`` (bottom to top)."""
    return parse_deck(text)


def make_state(
    table: list[str | None] | None = None,
    deck: str = "",
    **kwargs,
) -> DungeonState:
    """Build a state from card text.

    *table* lists up to four slots (``None`` for empty); *deck* is read
    bottom to top.
    """
    slots: list[Card | None] = [parse_card(t) if t else None for t in (table or [])]
    slots += [None] * (4 - len(slots))
    return DungeonState(table=slots, deck=DrawPile(parse_deck(deck)), **kwargs)


def full_deck() -> list[Card]:
    return [
        Card(suit=suit, rank=rank)
        for suit in Suit
        for rank in range(MIN_RANK, MAX_RANK + 1)
    ]


def random_deck(rng: random.Random, size: int) -> list[Card]:
    return rng.sample(full_deck(), size)


def brute_force_clearable(state: DungeonState) -> bool:
    """Exhaustive, un-memoized search.  Only for tiny decks.

    Terminates because a flee can never follow a flee, so every other
    action consumes a card.
    """
    if is_win(state):
        return True
    for action in enumerate_actions(state):
        out = apply_action(state, action)
        if out.terminal is Terminal.WIN:
            return True
        if out.state is not None and brute_force_clearable(out.state):
            return True
    return False


def reachable_states(state: DungeonState, limit: int = 20_000) -> Iterator[DungeonState]:
    """Yield *state* and the non-terminal states reachable from it."""
    stack = [state]
    seen = 0
    while stack and seen < limit:
        s = stack.pop()
        seen += 1
        yield s
        for action in enumerate_actions(s):
            out = apply_action(s, action)
            if out.state is not None:
                stack.append(out.state)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
