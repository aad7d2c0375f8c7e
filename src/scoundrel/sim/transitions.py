"""State transition engine -- applies one action to a dungeon state.

``apply_action`` never touches the state it is given: it works on a
private copy and returns a ``TransitionResult`` describing what came
out.  Terminal outcomes (the player died, or the dungeon is cleared) are
ordinary return values.  Actions that are not legal in the given state
produce the ``INVALID`` result instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from scoundrel.ir.cards import Card, CardRole, role_of
from scoundrel.sim.actions import Action, ActionKind, is_legal
from scoundrel.sim.core.game_state import DungeonState
from scoundrel.sim.mechanics.damage import calculate_damage, take_damage
from scoundrel.sim.mechanics.potions import drink_poison, heal
from scoundrel.sim.mechanics.rooms import finish_interaction, flee_room
from scoundrel.sim.mechanics.weapons import equip_weapon, record_kill, repair_weapon


class Terminal(str, Enum):
    """How a game ended."""

    WIN = "win"
    DEAD = "dead"


@dataclass(frozen=True)
class TransitionResult:
    """Outcome of applying one action.

    Attributes
    ----------
    state:
        The successor state, or ``None`` when the game ended or the
        action was illegal.
    terminal:
        ``Terminal.WIN`` / ``Terminal.DEAD`` when the game ended,
        otherwise ``None``.
    hp:
        Player HP after the action (``0`` on death).
    bonus:
        Last-card bonus, non-zero only when the final card of the
        dungeon was a healing potion.
    """

    state: DungeonState | None
    terminal: Terminal | None = None
    hp: int = 0
    bonus: int = 0

    @property
    def is_invalid(self) -> bool:
        return self.state is None and self.terminal is None

    @property
    def is_terminal(self) -> bool:
        return self.terminal is not None


INVALID = TransitionResult(state=None)
"""Returned for actions that are not legal in the given state."""


def _dead() -> TransitionResult:
    return TransitionResult(state=None, terminal=Terminal.DEAD, hp=0)


def _advance(state: DungeonState) -> TransitionResult:
    """Finish the interaction and report either a win or the new state."""
    if finish_interaction(state):
        return TransitionResult(state=None, terminal=Terminal.WIN, hp=state.hp)
    return TransitionResult(state=state, hp=state.hp)


# ---------------------------------------------------------------------------
# Per-kind resolution
# ---------------------------------------------------------------------------

def _fight(state: DungeonState, slot: int, card: Card, with_weapon: bool) -> TransitionResult:
    weapon_rank = state.weapon_rank if with_weapon else 0
    take_damage(state, calculate_damage(card.rank, weapon_rank))
    if state.hp <= 0:
        return _dead()
    if with_weapon:
        record_kill(state, card.rank)
    state.table[slot] = None
    return _advance(state)


def _drink(state: DungeonState, slot: int, card: Card) -> TransitionResult:
    state.table[slot] = None
    healing = role_of(card) is CardRole.HEALING_POTION

    # A healing potion as the very last card ends the game at once and
    # scores its rank as a bonus, even if a potion was already used.
    if healing and state.deck.is_empty and not state.has_table_cards:
        return TransitionResult(
            state=None, terminal=Terminal.WIN, hp=state.hp, bonus=card.rank
        )

    if state.potion_used_this_room:
        # Fizzles: no effect, but the card and the interaction are spent.
        return _advance(state)

    state.potion_used_this_room = True
    if healing:
        heal(state, card.rank)
    else:
        drink_poison(state)
        if state.hp <= 0:
            return _dead()
    return _advance(state)


def apply_action(state: DungeonState, action: Action) -> TransitionResult:
    """Apply *action* to a copy of *state*.

    Returns ``INVALID`` if the action is not legal here.
    """
    if not is_legal(state, action):
        return INVALID

    s = state.copy()

    if action.kind is ActionKind.FLEE:
        flee_room(s)
        return TransitionResult(state=s, hp=s.hp)

    slot = action.slot
    card = s.table[slot]

    if action.kind is ActionKind.FIGHT_FIST:
        return _fight(s, slot, card, with_weapon=False)
    if action.kind is ActionKind.FIGHT_WEAPON:
        return _fight(s, slot, card, with_weapon=True)
    if action.kind is ActionKind.EQUIP_WEAPON:
        equip_weapon(s, card.rank)
        s.table[slot] = None
        return _advance(s)
    if action.kind is ActionKind.USE_TOOLKIT:
        repair_weapon(s)
        s.table[slot] = None
        return _advance(s)
    return _drink(s, slot, card)
