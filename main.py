"""CLI entrypoint for the racer engine.

Prints the top speed of a racer roster.  With no arguments the built-in
sample roster is used; otherwise the first argument is a YAML roster path.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from racer_engine.config import load_roster
from racer_engine.core.registry import RacerRegistry, sample_registry

LOG_LEVEL_ENV: str = "RACER_ENGINE_LOG_LEVEL"
DEFAULT_LOG_LEVEL: int = logging.WARNING


def _resolve_log_level(name: str | None) -> int:
    """Map a level name to its number; unknown names fall back to WARNING."""
    if not name:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL


def main(argv: list[str] | None = None) -> None:
    """Print the top speed of the selected roster."""
    args = sys.argv[1:] if argv is None else argv
    logging.basicConfig(
        level=_resolve_log_level(os.environ.get(LOG_LEVEL_ENV)),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    registry: RacerRegistry = load_roster(Path(args[0])) if args else sample_registry()
    print(registry.top_speed())


if __name__ == "__main__":
    sys.exit(main() or 0)
