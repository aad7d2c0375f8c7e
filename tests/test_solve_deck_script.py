"""Tests for the solve_deck command-line script."""

import pytest

from scripts.solve_deck import main


class TestSolveDeckScript:
    def test_clearable_with_path(self, capsys):
        code = main(["2◆ 5♠ 3♥", "--path"])
        out = capsys.readouterr().out
        assert code == 0
        assert out.startswith("CLEARABLE")
        assert "Result: win" in out

    def test_not_clearable(self, capsys):
        assert main(["A♠ A♣ A♠ A♣"]) == 0
        assert capsys.readouterr().out.startswith("NOT CLEARABLE")

    def test_node_limit_is_exit_code_2(self, capsys):
        assert main(["2♠ 3♠ 4♠ 5♠ 6♠ 7♠", "--max-nodes", "0"]) == 2
        assert "node_limit" in capsys.readouterr().out

    def test_classic_mode_flag(self, capsys):
        assert main(["J◆ 2♠", "--no-special"]) == 0
        assert capsys.readouterr().out.startswith("CLEARABLE")

    def test_deck_from_file(self, tmp_path, capsys):
        deck_file = tmp_path / "deck.txt"
        deck_file.write_text("2◆,\n5♠\n", encoding="utf-8")
        assert main(["--file", str(deck_file)]) == 0
        assert capsys.readouterr().out.startswith("CLEARABLE")

    def test_bad_card_is_usage_error(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["2X"])
        assert excinfo.value.code == 2

    def test_bad_hp_is_usage_error(self):
        with pytest.raises(SystemExit):
            main(["2♠", "--hp", "25"])

    def test_missing_deck(self):
        with pytest.raises(SystemExit):
            main([])
