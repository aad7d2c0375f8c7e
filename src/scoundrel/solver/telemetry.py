"""Telemetry for a single solver run.

``SearchTelemetry`` is a plain ``dataclass`` (not a Pydantic model) so
that the counters can be bumped inside the search loop at no extra
cost.

- **nodes**: search loop iterations, the quantity ``max_nodes`` limits.
- **states_visited**: distinct states expanded.
- **duplicate_prunes**: frames or children dropped because their key
  was already visited.
- **dead_ends**: actions that killed the player.
- **max_depth**: deepest frame stack reached.
- **batches**: ``step`` calls made (cooperative yields + 1).
- **elapsed_ms**: wall-clock time spent inside ``step``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SearchTelemetry:
    nodes: int = 0
    states_visited: int = 0
    duplicate_prunes: int = 0
    dead_ends: int = 0
    max_depth: int = 0
    batches: int = 0
    elapsed_ms: float = 0.0
