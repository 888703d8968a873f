"""Racer abstraction for the racer engine.

A racer is any of a closed set of variants, each computing its ``speed``
at access time.  Speed is the only thing racers are ranked by.
"""

from __future__ import annotations

from typing import Union

from racer_engine.core.bird import FlappyBird, Penguin, SwiftBird, UnladenSwallow
from racer_engine.core.motorcycle import Motorcycle

Racer = Union[FlappyBird, Penguin, SwiftBird, UnladenSwallow, Motorcycle]

RACER_TYPES: tuple[type, ...] = (
    FlappyBird,
    Penguin,
    SwiftBird,
    UnladenSwallow,
    Motorcycle,
)


def racer_speed(racer: Racer) -> float:
    """Return the racing speed of *racer* as a float.

    Never reads a flight speed from a racer that cannot fly, so it is
    safe for ``UnladenSwallow.UNKNOWN`` (which races at 0.0).

    Raises:
        TypeError: If *racer* is not one of the racer variants.
    """
    if not isinstance(racer, RACER_TYPES):
        raise TypeError(f"{type(racer).__name__} is not a racer.")
    return float(racer.speed)
