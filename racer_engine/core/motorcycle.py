"""Motorcycle model for the racer engine."""

import math
from dataclasses import dataclass

# Speed every motorcycle leaves the factory with.
DEFAULT_MOTORCYCLE_SPEED: float = 200.0


@dataclass(frozen=True)
class Motorcycle:
    """A wheeled racer with a stored constant speed.

    Attributes:
        name: Rider or machine name.
        speed: Constant racing speed (>= 0.0).
    """

    name: str
    speed: float = DEFAULT_MOTORCYCLE_SPEED

    def __post_init__(self) -> None:
        """Validate motorcycle parameters."""
        if not self.name:
            raise ValueError("name must not be empty.")
        if not math.isfinite(self.speed) or self.speed < 0.0:
            raise ValueError("speed must be finite and >= 0.0.")
