"""Player actions and legal-move enumeration.

Every decision in Scoundrel is one of six action kinds.  Apart from
fleeing, each targets one of the four table slots, so there are only
``1 + 5 * 4`` distinct actions; they are created once here and shared,
which keeps enumeration allocation-free inside the solver.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from scoundrel.ir.cards import CardRole, card_text, role_of
from scoundrel.sim.core.game_state import TABLE_SIZE, DungeonState
from scoundrel.sim.mechanics.rooms import can_flee
from scoundrel.sim.mechanics.weapons import can_use_weapon


class ActionKind(str, Enum):
    """The six things a player can do."""

    FLEE = "flee"
    FIGHT_FIST = "fight_fist"
    FIGHT_WEAPON = "fight_weapon"
    EQUIP_WEAPON = "equip_weapon"
    USE_TOOLKIT = "use_toolkit"
    DRINK_POTION = "drink_potion"


# Which card role each slot-targeting action expects to find.
_ROLES_FOR_KIND: dict[ActionKind, frozenset[CardRole]] = {
    ActionKind.FIGHT_FIST: frozenset({CardRole.ENEMY}),
    ActionKind.FIGHT_WEAPON: frozenset({CardRole.ENEMY}),
    ActionKind.EQUIP_WEAPON: frozenset({CardRole.WEAPON}),
    ActionKind.USE_TOOLKIT: frozenset({CardRole.REPAIR_TOOLKIT}),
    ActionKind.DRINK_POTION: frozenset(
        {CardRole.HEALING_POTION, CardRole.POISON_POTION}
    ),
}


# ---------------------------------------------------------------------------
# Action (value object)
# ---------------------------------------------------------------------------

class Action(BaseModel):
    """A single player decision.

    Parameters
    ----------
    kind:
        What the player does.
    slot:
        Table slot (0-3) the action targets, or ``None`` for ``FLEE``.
    """

    model_config = {"frozen": True}

    kind: ActionKind
    slot: int | None = Field(default=None, ge=0, lt=TABLE_SIZE)

    def describe(self, state: DungeonState | None = None) -> str:
        """Human-readable label, naming the card when *state* is given."""
        if self.kind is ActionKind.FLEE:
            return "flee"
        label = f"{self.kind.value} slot {self.slot}"
        if state is not None and self.slot is not None:
            card = state.table[self.slot]
            if card is not None:
                label += f" ({card_text(card)})"
        return label

    def __str__(self) -> str:
        return self.describe()


FLEE = Action(kind=ActionKind.FLEE)

_SLOT_ACTIONS: dict[tuple[ActionKind, int], Action] = {
    (kind, slot): Action(kind=kind, slot=slot)
    for kind in _ROLES_FOR_KIND
    for slot in range(TABLE_SIZE)
}


def action_for(kind: ActionKind, slot: int | None = None) -> Action:
    """Return the shared ``Action`` instance for *kind* and *slot*."""
    if kind is ActionKind.FLEE:
        return FLEE
    try:
        return _SLOT_ACTIONS[(kind, slot)]
    except KeyError:
        raise ValueError(f"No action {kind.value!r} for slot {slot!r}") from None


# ---------------------------------------------------------------------------
# Enumeration
# ---------------------------------------------------------------------------

def enumerate_actions(state: DungeonState) -> list[Action]:
    """List every legal action in *state*.

    Order is deterministic: flee first, then slot order, fist before
    weapon.  Empty slots produce nothing.
    """
    actions: list[Action] = []

    if can_flee(state):
        actions.append(FLEE)

    for slot, card in enumerate(state.table):
        if card is None:
            continue
        role = role_of(card)
        if role is CardRole.ENEMY:
            actions.append(_SLOT_ACTIONS[(ActionKind.FIGHT_FIST, slot)])
            if can_use_weapon(state, card.rank):
                actions.append(_SLOT_ACTIONS[(ActionKind.FIGHT_WEAPON, slot)])
        elif role is CardRole.WEAPON:
            actions.append(_SLOT_ACTIONS[(ActionKind.EQUIP_WEAPON, slot)])
        elif role is CardRole.REPAIR_TOOLKIT:
            actions.append(_SLOT_ACTIONS[(ActionKind.USE_TOOLKIT, slot)])
        else:
            actions.append(_SLOT_ACTIONS[(ActionKind.DRINK_POTION, slot)])

    return actions


def is_legal(state: DungeonState, action: Action) -> bool:
    """Whether *action* may be taken in *state*."""
    if action.kind is ActionKind.FLEE:
        return can_flee(state)

    slot = action.slot
    if slot is None or not 0 <= slot < TABLE_SIZE:
        return False
    card = state.table[slot]
    if card is None or role_of(card) not in _ROLES_FOR_KIND[action.kind]:
        return False
    if action.kind is ActionKind.FIGHT_WEAPON:
        return can_use_weapon(state, card.rank)
    return True
