"""Cooperative solving -- long searches that share the thread with a host.

The search is CPU-bound, so running it to completion inside an event
loop would starve everything else.  Both drivers here step a
``DungeonSearch`` in bounded batches and give control back between
batches; cancellation is polled at exactly those points.

- ``solve_async`` suspends with ``await asyncio.sleep(0)`` between
  batches, for asyncio hosts.
- ``CooperativeSolver`` does one batch per ``poll()`` call, for hosts
  that drive their own tick loop (a game loop, a GUI timer, ...).

Either way, an abort yields an indeterminate verdict with
``reason=StopReason.CANCELLED``; it never raises.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Iterable, Union

from scoundrel.ir.cards import Card
from scoundrel.solver.config import SolverOptions
from scoundrel.solver.search import DungeonSearch
from scoundrel.solver.verdict import Verdict

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# CancellationToken
# ---------------------------------------------------------------------------

class CancellationToken:
    """Flag a caller sets to ask a running search to stop.

    Optionally wraps a predicate, so an existing "should I stop?"
    callable can be used where a token is expected.
    """

    def __init__(self, predicate: Callable[[], bool] | None = None) -> None:
        self._cancelled = False
        self._predicate = predicate

    @classmethod
    def from_predicate(cls, predicate: Callable[[], bool]) -> CancellationToken:
        return cls(predicate)

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        if self._cancelled:
            return True
        if self._predicate is not None and self._predicate():
            self._cancelled = True
        return self._cancelled

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self._cancelled})"


AbortHook = Union[CancellationToken, Callable[[], bool], None]


def _as_token(cancel: AbortHook) -> CancellationToken | None:
    if cancel is None or isinstance(cancel, CancellationToken):
        return cancel
    if callable(cancel):
        return CancellationToken.from_predicate(cancel)
    raise TypeError(
        f"cancel must be a CancellationToken or a callable, got {type(cancel).__name__}"
    )


# ---------------------------------------------------------------------------
# asyncio driver
# ---------------------------------------------------------------------------

async def solve_async(
    deck: Iterable[Card],
    options: SolverOptions | None = None,
    *,
    cancel: AbortHook = None,
    **overrides,
) -> Verdict:
    """Solve *deck* without blocking the running event loop.

    Runs ``options.yield_every`` search iterations at a time and awaits
    ``asyncio.sleep(0)`` in between.  *cancel* (a token or a plain
    predicate) is checked at every suspension point.
    """
    token = _as_token(cancel)
    search = DungeonSearch(deck, options, **overrides)
    batch = search.options.yield_every

    while True:
        if token is not None and token.cancelled:
            return search.cancel()
        verdict = search.step(batch)
        if verdict is not None:
            return verdict
        await asyncio.sleep(0)


# ---------------------------------------------------------------------------
# Tick-driven driver
# ---------------------------------------------------------------------------

class CooperativeSolver:
    """Solve a deck one bounded batch per host tick.

    Usage::

        solver = CooperativeSolver(deck, include_special_cards=False)
        # inside the host's loop, once per tick:
        verdict = solver.poll()
        if verdict is not None:
            ...  # done; further polls return the same verdict

    Parameters
    ----------
    deck:
        The shuffled deck, bottom to top.
    options:
        Solver options; ``yield_every`` sets the batch size per tick.
    cancel:
        Optional token or predicate checked at the start of every poll.
    """

    def __init__(
        self,
        deck: Iterable[Card],
        options: SolverOptions | None = None,
        *,
        cancel: AbortHook = None,
        **overrides,
    ) -> None:
        self._search = DungeonSearch(deck, options, **overrides)
        self._token = _as_token(cancel)

    @property
    def options(self) -> SolverOptions:
        return self._search.options

    @property
    def done(self) -> bool:
        return self._search.done

    @property
    def verdict(self) -> Verdict | None:
        return self._search.verdict

    def poll(self) -> Verdict | None:
        """Run one batch.  Returns the verdict when finished, else ``None``."""
        if self._search.done:
            return self._search.verdict
        if self._token is not None and self._token.cancelled:
            return self._search.cancel()
        return self._search.step(self._search.options.yield_every)

    def cancel(self) -> Verdict:
        """Abort immediately, without waiting for the next poll."""
        return self._search.cancel()
