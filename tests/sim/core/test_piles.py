"""Tests for DrawPile."""

from scoundrel.sim.core.piles import DrawPile
from tests.conftest import c, cards


class TestDrawPile:
    def test_draw_top_takes_last_card(self):
        pile = DrawPile(cards("2♠ 3♠ 4♠"))
        assert pile.draw_top() == c("4♠")
        assert pile.draw_top() == c("3♠")
        assert len(pile) == 1

    def test_draw_from_empty_returns_none(self):
        pile = DrawPile()
        assert pile.is_empty
        assert pile.draw_top() is None
        assert pile.top is None

    def test_return_to_bottom(self):
        pile = DrawPile(cards("2♠ 3♠"))
        pile.return_to_bottom(c("9♥"))
        assert list(pile) == cards("9♥ 2♠ 3♠")
        assert pile.top == c("3♠")

    def test_copy_is_independent(self):
        pile = DrawPile(cards("2♠ 3♠"))
        clone = pile.copy()
        clone.draw_top()
        clone.return_to_bottom(c("5♦"))
        assert list(pile) == cards("2♠ 3♠")
        assert list(clone) == cards("5♦ 2♠")

    def test_equality(self):
        assert DrawPile(cards("2♠ 3♠")) == DrawPile(cards("2♠ 3♠"))
        assert DrawPile(cards("2♠ 3♠")) != DrawPile(cards("3♠ 2♠"))
