"""Bird models for the racer engine.

Each bird carries a ``name`` and an explicit ``can_fly`` flag.  Flying
birds additionally compute an ``airspeed_velocity``; every bird computes
its racing ``speed`` at access time.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from racer_engine.core.flight import InvalidFlightStateError

# Fixed racing speed of a bird that cannot fly.
PENGUIN_SPEED: float = 42.0


class BirdDescription:
    """Mixin providing the human-readable description of a bird."""

    @property
    def description(self) -> str:
        if self.can_fly:
            return f"I am a {self.name} and I can fly!"
        return f"I am a {self.name} and I can't fly!"

    def __str__(self) -> str:
        return self.description


# ---------------------------------------------------------------------------
# Struct-like birds
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FlappyBird(BirdDescription):
    """A bird whose speed comes from how it flaps.

    Attributes:
        name: Bird name.
        flappy_amplitude: Wing-beat amplitude (>= 0.0).
        flappy_frequency: Wing-beat frequency (>= 0.0).
    """

    can_fly: ClassVar[bool] = True

    name: str
    flappy_amplitude: float
    flappy_frequency: float

    def __post_init__(self) -> None:
        """Validate flapping parameters."""
        if not self.name:
            raise ValueError("name must not be empty.")
        if not math.isfinite(self.flappy_amplitude) or self.flappy_amplitude < 0.0:
            raise ValueError("flappy_amplitude must be finite and >= 0.0.")
        if not math.isfinite(self.flappy_frequency) or self.flappy_frequency < 0.0:
            raise ValueError("flappy_frequency must be finite and >= 0.0.")

    @property
    def airspeed_velocity(self) -> float:
        return 3 * self.flappy_frequency * self.flappy_amplitude

    @property
    def speed(self) -> float:
        return self.airspeed_velocity


@dataclass(frozen=True)
class Penguin(BirdDescription):
    """A flightless bird racing at a fixed speed."""

    can_fly: ClassVar[bool] = False

    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("name must not be empty.")

    @property
    def speed(self) -> float:
        return PENGUIN_SPEED


@dataclass(frozen=True)
class SwiftBird(BirdDescription):
    """A versioned bird that gets faster with every release.

    Attributes:
        version: Release number (>= 0.0).  Airspeed is
            ``version * 1000``.
    """

    can_fly: ClassVar[bool] = True

    version: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.version) or self.version < 0.0:
            raise ValueError("version must be finite and >= 0.0.")

    @property
    def name(self) -> str:
        return f"Swift {self.version}"

    @property
    def airspeed_velocity(self) -> float:
        return self.version * 1000.0

    @property
    def speed(self) -> float:
        return self.airspeed_velocity


# ---------------------------------------------------------------------------
# Discrete-variant bird
# ---------------------------------------------------------------------------


class UnladenSwallow(BirdDescription, Enum):
    """A swallow identified only by where it comes from.

    ``UNKNOWN`` cannot fly and has no defined airspeed velocity.
    """

    AFRICAN = "african"
    EUROPEAN = "european"
    UNKNOWN = "unknown"

    @property
    def name(self) -> str:  # type: ignore[override]
        return _SWALLOW_NAMES[self]

    @property
    def can_fly(self) -> bool:
        return self is not UnladenSwallow.UNKNOWN

    @property
    def airspeed_velocity(self) -> float:
        """Flight speed of the swallow.

        Raises:
            InvalidFlightStateError: For ``UNKNOWN``.
        """
        if self is UnladenSwallow.UNKNOWN:
            raise InvalidFlightStateError("Unknown swallow type!")
        return _SWALLOW_AIRSPEEDS[self]

    @property
    def speed(self) -> float:
        # can_fly must short-circuit before airspeed_velocity is read.
        return self.airspeed_velocity if self.can_fly else 0.0

    def __str__(self) -> str:
        return self.description


_SWALLOW_NAMES: dict[UnladenSwallow, str] = {
    UnladenSwallow.AFRICAN: "African",
    UnladenSwallow.EUROPEAN: "European",
    UnladenSwallow.UNKNOWN: "What do you mean? African or European?",
}

_SWALLOW_AIRSPEEDS: dict[UnladenSwallow, float] = {
    UnladenSwallow.AFRICAN: 10.0,
    UnladenSwallow.EUROPEAN: 9.9,
}
