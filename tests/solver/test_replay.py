"""Tests for path replay and scoring."""

import logging

import pytest

from scoundrel.sim.actions import FLEE, ActionKind, action_for
from scoundrel.solver.replay import IllegalActionError, replay_path
from tests.conftest import cards

FIST = ActionKind.FIGHT_FIST
POTION = ActionKind.DRINK_POTION


class TestWins:
    def test_last_card_healing_bonus(self):
        result = replay_path(cards("5♥"), [action_for(POTION, 0)])
        assert result.outcome == "win"
        assert result.hp == 20
        assert result.bonus == 5
        assert result.score == 25
        assert result.steps == 1
        assert result.final_state is None

    def test_last_card_poison(self):
        result = replay_path(cards("Q♥"), [action_for(POTION, 0)])
        assert result.outcome == "win"
        assert result.bonus == 0
        assert result.score == 10

    def test_empty_deck_wins_without_actions(self):
        result = replay_path([], [])
        assert result.outcome == "win"
        assert result.score == 20
        assert result.steps == 0

    def test_flee_then_clear(self):
        actions = [FLEE, action_for(FIST, 0)]
        result = replay_path(cards("4♠"), actions)
        assert result.outcome == "win"
        assert result.hp == 16
        assert result.steps == 2


class TestDeaths:
    def test_exact_lethal_enemy_not_counted(self):
        result = replay_path(cards("9♣ 5♠"), [action_for(FIST, 0)], starting_hp=5)
        assert result.outcome == "dead"
        assert result.hp == 0
        assert result.score == -9

    def test_overkilling_enemy_counted(self):
        result = replay_path(cards("9♣ 5♠"), [action_for(FIST, 1)], starting_hp=5)
        assert result.outcome == "dead"
        assert result.score == -14

    def test_poison_death_counts_every_enemy(self):
        result = replay_path(cards("9♣ Q♥"), [action_for(POTION, 0)], starting_hp=10)
        assert result.outcome == "dead"
        assert result.score == -9

    def test_dead_start(self):
        result = replay_path(cards("9♣ 5♠"), [], starting_hp=0)
        assert result.outcome == "dead"
        assert result.score == -14


class TestIllegal:
    def test_illegal_action(self):
        with pytest.raises(IllegalActionError) as excinfo:
            replay_path(cards("5♥"), [action_for(FIST, 0)])
        assert excinfo.value.step == 0
        assert excinfo.value.action == action_for(FIST, 0)

    def test_illegal_later_in_path(self):
        with pytest.raises(IllegalActionError) as excinfo:
            replay_path(cards("2♠ 3♠"), [FLEE, FLEE])
        assert excinfo.value.step == 1

    def test_actions_after_game_over(self):
        with pytest.raises(IllegalActionError) as excinfo:
            replay_path(cards("5♥"), [action_for(POTION, 0), FLEE])
        assert excinfo.value.step == 1

    def test_actions_on_finished_start(self):
        with pytest.raises(IllegalActionError):
            replay_path([], [FLEE])

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            replay_path(cards("5♥"), [action_for(FIST, 2)])

    def test_mode_changes_legality(self):
        # Classic mode removes the toolkit, so the weapon sits in slot 0.
        deck = cards("3◆ J◆")
        equip = action_for(ActionKind.EQUIP_WEAPON, 0)
        assert replay_path(deck, [equip], include_special_cards=False).outcome == "win"
        with pytest.raises(IllegalActionError):
            replay_path(deck, [equip], include_special_cards=True)


class TestInProgress:
    def test_unfinished_game(self, caplog):
        with caplog.at_level(logging.WARNING, logger="scoundrel.solver.replay"):
            result = replay_path(cards("2♠ 3♠"), [action_for(FIST, 0)])
        assert result.outcome == "in_progress"
        assert result.hp == 17
        assert result.score is None
        assert result.final_state is not None
        assert "without reaching the end" in caplog.text
