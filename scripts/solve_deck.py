"""Solve a Scoundrel deck given as card text.

The deck is read bottom to top: the last card listed is the first one
drawn.

Usage:
    uv run python scripts/solve_deck.py "2◆ 5♠ 3♥ 9♣ 7♠" --no-special --path
    uv run python scripts/solve_deck.py --file deck.txt --time-limit-ms 2000
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from scoundrel.ir.cards import parse_deck
from scoundrel.sim.core.game_state import make_initial_state
from scoundrel.sim.transitions import apply_action
from scoundrel.solver import SolverOptions, replay_path, solve


def _print_path(deck, options: SolverOptions, path) -> None:
    state = make_initial_state(
        deck,
        include_special_cards=options.include_special_cards,
        starting_hp=options.starting_hp,
    )
    for i, action in enumerate(path, start=1):
        print(f"  {i:3d}. [HP {state.hp:2d}] {action.describe(state)}")
        out = apply_action(state, action)
        if out.state is None:
            break
        state = out.state

    result = replay_path(deck, path, options)
    print(f"Result: {result.outcome}  HP {result.hp}  bonus +{result.bonus}  score {result.score}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("deck", nargs="?", help="Cards separated by spaces or commas")
    parser.add_argument("--file", type=Path, help="Read the deck from a text file")
    parser.add_argument(
        "--special",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Include J/Q/K/A of Hearts and Diamonds (default: yes)",
    )
    parser.add_argument("--hp", type=int, default=20, help="Starting HP")
    parser.add_argument("--max-nodes", type=int, default=500_000)
    parser.add_argument("--time-limit-ms", type=float, default=None)
    parser.add_argument("--path", action="store_true", help="Print a winning line")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.file is not None:
        text = args.file.read_text(encoding="utf-8")
    elif args.deck is not None:
        text = args.deck
    else:
        parser.error("give a deck or --file")

    try:
        deck = parse_deck(text)
        options = SolverOptions(
            include_special_cards=args.special,
            starting_hp=args.hp,
            max_nodes=args.max_nodes,
            time_limit_ms=args.time_limit_ms,
            return_path=args.path,
        )
    except ValueError as exc:
        parser.error(str(exc))

    verdict = solve(deck, options)

    label = {True: "CLEARABLE", False: "NOT CLEARABLE", None: "UNDETERMINED"}[verdict.clearable]
    reason = f" ({verdict.reason.value})" if verdict.reason is not None else ""
    print(f"{label}{reason}  nodes={verdict.nodes}  {verdict.elapsed_ms:.0f}ms")

    if verdict.is_clearable and verdict.path is not None:
        _print_path(deck, options, verdict.path)

    return 0 if verdict.clearable is not None else 2


if __name__ == "__main__":
    sys.exit(main())
