"""Racer registry for the racer engine.

Holds a fixed, ordered, immutable sequence of racers and answers the
one question racers care about: how fast is the fastest of them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import overload

import numpy as np

from racer_engine.core.bird import FlappyBird, Penguin, SwiftBird, UnladenSwallow
from racer_engine.core.motorcycle import Motorcycle
from racer_engine.core.racer import Racer, racer_speed

logger = logging.getLogger(__name__)


class RacerRegistry:
    """Immutable ordered collection of racers.

    Attributes:
        racers: The racers, in registration order.
    """

    __slots__ = ("racers",)

    def __init__(self, racers: Iterable[Racer] = ()) -> None:
        self.racers: tuple[Racer, ...] = tuple(racers)

    @classmethod
    def from_iterable(cls, racers: Iterable[Racer]) -> RacerRegistry:
        return cls(racers)

    def __len__(self) -> int:
        return len(self.racers)

    def __iter__(self) -> Iterator[Racer]:
        return iter(self.racers)

    @overload
    def __getitem__(self, index: int) -> Racer: ...

    @overload
    def __getitem__(self, index: slice) -> RacerRegistry: ...

    def __getitem__(self, index: int | slice) -> Racer | RacerRegistry:
        if isinstance(index, slice):
            return RacerRegistry(self.racers[index])
        return self.racers[index]

    def __repr__(self) -> str:
        return f"RacerRegistry(racers={len(self.racers)})"

    def speeds(self) -> np.ndarray:
        """Return every racer's speed in registration order.

        Returns:
            A ``float64`` array of length ``len(self)``.
        """
        return np.fromiter(
            (racer_speed(r) for r in self.racers),
            dtype=np.float64,
            count=len(self.racers),
        )

    def top_speed(self) -> float:
        """Return the maximum speed across the registry.

        An empty registry has a top speed of ``0.0``.
        """
        if not self.racers:
            return 0.0
        top = float(self.speeds().max())
        logger.debug("Top speed over %d racers: %s", len(self.racers), top)
        return top

    def fastest(self) -> Racer | None:
        """Return the first racer with the top speed, or ``None`` if empty."""
        if not self.racers:
            return None
        return self.racers[int(np.argmax(self.speeds()))]


def top_speed(racers: Iterable[Racer]) -> float:
    """Return the top speed of any iterable of racers (``0.0`` if empty)."""
    return RacerRegistry(racers).top_speed()


def sample_registry() -> RacerRegistry:
    """Return the seven-racer sample roster."""
    return RacerRegistry(
        [
            UnladenSwallow.AFRICAN,
            UnladenSwallow.EUROPEAN,
            UnladenSwallow.UNKNOWN,
            Penguin(name="King Penguin"),
            SwiftBird(version=3.0),
            FlappyBird(name="Felipe", flappy_amplitude=3.0, flappy_frequency=20.0),
            Motorcycle(name="Giacomo"),
        ]
    )
