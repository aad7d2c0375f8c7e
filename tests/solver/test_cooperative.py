"""Tests for the cooperative (asyncio and tick-driven) solvers."""

import asyncio

import pytest

from scoundrel.solver.cooperative import CancellationToken, CooperativeSolver, solve_async
from scoundrel.solver.search import solve
from scoundrel.solver.verdict import StopReason
from tests.conftest import cards

DECK = "2♠ 3♠ 4♠ 5♠ 6♠ 7♠ 8♠ 9♠"


class TestCancellationToken:
    def test_flag(self):
        token = CancellationToken()
        assert not token.cancelled
        token.cancel()
        assert token.cancelled

    def test_predicate_latches(self):
        answers = iter([False, True, False])
        token = CancellationToken.from_predicate(lambda: next(answers))
        assert not token.cancelled
        assert token.cancelled
        assert token.cancelled


# ---------------------------------------------------------------------------
# solve_async
# ---------------------------------------------------------------------------

class TestSolveAsync:
    def test_matches_blocking_solve(self):
        blocking = solve(cards(DECK))
        verdict = asyncio.run(solve_async(cards(DECK), yield_every=5))
        assert verdict.clearable == blocking.clearable
        assert verdict.nodes == blocking.nodes

    def test_yields_to_other_tasks(self):
        ticks = 0

        async def ticker(stop: asyncio.Event) -> None:
            nonlocal ticks
            while not stop.is_set():
                ticks += 1
                await asyncio.sleep(0)

        async def main():
            stop = asyncio.Event()
            task = asyncio.create_task(ticker(stop))
            verdict = await solve_async(cards(DECK), yield_every=1)
            stop.set()
            await task
            return verdict

        verdict = asyncio.run(main())
        assert verdict.clearable is False
        assert ticks > 1
        assert verdict.telemetry.batches > 1

    def test_cancelled_up_front(self):
        token = CancellationToken()
        token.cancel()
        verdict = asyncio.run(solve_async(cards(DECK), cancel=token))
        assert verdict.clearable is None
        assert verdict.reason is StopReason.CANCELLED
        assert verdict.nodes == 0

    def test_predicate_cancels_mid_search(self):
        polls = 0

        def should_stop() -> bool:
            nonlocal polls
            polls += 1
            return polls > 3

        verdict = asyncio.run(solve_async(cards(DECK), cancel=should_stop, yield_every=1))
        assert verdict.reason is StopReason.CANCELLED
        assert verdict.nodes == 3

    def test_searches_interleave(self):
        async def main():
            return await asyncio.gather(
                solve_async(cards(DECK), yield_every=2),
                solve_async(cards("2◆"), include_special_cards=False, yield_every=2),
                solve_async(cards("A♠ A♣ A♠ A♣"), yield_every=2),
            )

        first, second, third = asyncio.run(main())
        assert first.clearable is False
        assert second.clearable is True
        assert third.clearable is False

    def test_trivial_start_never_yields(self):
        verdict = asyncio.run(solve_async([], return_path=True))
        assert verdict.clearable is True
        assert verdict.path == []

    def test_bad_hook(self):
        with pytest.raises(TypeError):
            asyncio.run(solve_async(cards(DECK), cancel=42))


# ---------------------------------------------------------------------------
# CooperativeSolver
# ---------------------------------------------------------------------------

class TestCooperativeSolver:
    def test_polls_to_completion(self):
        solver = CooperativeSolver(cards(DECK), yield_every=4)
        polls = 0
        verdict = None
        while verdict is None:
            verdict = solver.poll()
            polls += 1
        assert polls > 1
        assert solver.done
        assert verdict.clearable == solve(cards(DECK)).clearable
        assert solver.poll() is verdict

    def test_batch_size_bounds_each_poll(self):
        solver = CooperativeSolver(cards(DECK), yield_every=3)
        assert solver.poll() is None
        assert solver.verdict is None
        assert not solver.done

    def test_cancel_method(self):
        solver = CooperativeSolver(cards(DECK), yield_every=1)
        solver.poll()
        verdict = solver.cancel()
        assert verdict.reason is StopReason.CANCELLED
        assert solver.poll() is verdict

    def test_token_checked_each_poll(self):
        token = CancellationToken()
        solver = CooperativeSolver(cards(DECK), cancel=token, yield_every=1)
        assert solver.poll() is None
        token.cancel()
        verdict = solver.poll()
        assert verdict is not None
        assert verdict.reason is StopReason.CANCELLED

    def test_options_exposed(self):
        solver = CooperativeSolver(cards(DECK), yield_every=7, max_nodes=100)
        assert solver.options.yield_every == 7
        assert solver.options.max_nodes == 100

    def test_bad_hook(self):
        with pytest.raises(TypeError):
            CooperativeSolver(cards(DECK), cancel="stop")
