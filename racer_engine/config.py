"""Roster loader for the racer engine."""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any, Callable

import yaml

from racer_engine.core.bird import FlappyBird, Penguin, SwiftBird, UnladenSwallow
from racer_engine.core.motorcycle import Motorcycle
from racer_engine.core.racer import Racer
from racer_engine.core.registry import RacerRegistry

logger = logging.getLogger(__name__)

DATA_DIR: Path = Path(__file__).resolve().parent.parent / "data"
ROSTER_PATH: Path = DATA_DIR / "racers.yaml"

# Required fields per racer kind, and which of them must be numeric.
_REQUIRED_FIELDS: dict[str, tuple[str, ...]] = {
    "flappy_bird": ("name", "flappy_amplitude", "flappy_frequency"),
    "penguin": ("name",),
    "swift_bird": ("version",),
    "unladen_swallow": ("variant",),
    "motorcycle": ("name",),
}

_OPTIONAL_FIELDS: dict[str, tuple[str, ...]] = {
    "motorcycle": ("speed",),
}

_NUMERIC_FIELDS: tuple[str, ...] = (
    "flappy_amplitude",
    "flappy_frequency",
    "version",
    "speed",
)


def _build_swallow(entry: dict[str, Any]) -> UnladenSwallow:
    variant = str(entry["variant"]).lower()
    try:
        return UnladenSwallow(variant)
    except ValueError:
        raise ValueError(f"Unknown swallow variant '{entry['variant']}'") from None


def _build_motorcycle(entry: dict[str, Any]) -> Motorcycle:
    if "speed" in entry:
        return Motorcycle(name=str(entry["name"]), speed=float(entry["speed"]))
    return Motorcycle(name=str(entry["name"]))


_BUILDERS: dict[str, Callable[[dict[str, Any]], Racer]] = {
    "flappy_bird": lambda e: FlappyBird(
        name=str(e["name"]),
        flappy_amplitude=float(e["flappy_amplitude"]),
        flappy_frequency=float(e["flappy_frequency"]),
    ),
    "penguin": lambda e: Penguin(name=str(e["name"])),
    "swift_bird": lambda e: SwiftBird(version=float(e["version"])),
    "unladen_swallow": _build_swallow,
    "motorcycle": _build_motorcycle,
}


def load_roster(path: Path | None = None) -> RacerRegistry:
    """Load a racer roster from a YAML file.

    The file holds a top-level ``racers`` list.  Each entry names its
    ``kind`` plus the fields that kind needs, and is converted into the
    matching racer.

    Args:
        path: Optional override for the roster file path.

    Returns:
        A :class:`RacerRegistry` in file order.

    Raises:
        FileNotFoundError: If the roster file does not exist.
        ValueError: If the file has no ``racers`` list, or an entry has an
            unknown kind, a missing or null field, a non-numeric or
            non-finite value, or values the racer itself rejects.
    """
    roster_path = path or ROSTER_PATH
    if not roster_path.exists():
        raise FileNotFoundError(f"Roster file not found: {roster_path}")

    with open(roster_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh)

    if not isinstance(data, dict) or not isinstance(data.get("racers"), list):
        raise ValueError(f"Roster file {roster_path} must contain a 'racers' list")

    racers: list[Racer] = []

    for idx, entry in enumerate(data["racers"]):
        if not isinstance(entry, dict):
            raise ValueError(f"Racer entry {idx} must be a mapping")

        kind = entry.get("kind")
        if kind not in _REQUIRED_FIELDS:
            raise ValueError(f"Racer entry {idx} has unknown kind {kind!r}")

        # --- Validate required fields (null counts as missing) ---
        for field in _REQUIRED_FIELDS[kind]:
            if entry.get(field) is None:
                raise ValueError(
                    f"Racer entry {idx} ({kind}) is missing required field '{field}'"
                )

        # --- Validate numeric fields of this kind ---
        kind_fields = _REQUIRED_FIELDS[kind] + _OPTIONAL_FIELDS.get(kind, ())
        for field in kind_fields:
            if field not in _NUMERIC_FIELDS or field not in entry:
                continue
            val = entry[field]
            if isinstance(val, bool) or not isinstance(val, (int, float)):
                raise ValueError(
                    f"Racer entry {idx} ({kind}): "
                    f"'{field}' must be numeric, got {type(val).__name__}"
                )
            if not math.isfinite(val):
                raise ValueError(
                    f"Racer entry {idx} ({kind}): '{field}' must be finite, got {val}"
                )

        try:
            racers.append(_BUILDERS[kind](entry))
        except ValueError as exc:
            raise ValueError(f"Racer entry {idx} ({kind}): {exc}") from exc

    logger.debug("Loaded %d racers from %s", len(racers), roster_path)
    return RacerRegistry(racers)
