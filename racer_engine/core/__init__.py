"""Core racer modules for the racer engine."""

from racer_engine.core.bird import (
    PENGUIN_SPEED,
    FlappyBird,
    Penguin,
    SwiftBird,
    UnladenSwallow,
)
from racer_engine.core.flight import InvalidFlightStateError, airspeed_velocity
from racer_engine.core.motorcycle import DEFAULT_MOTORCYCLE_SPEED, Motorcycle
from racer_engine.core.racer import Racer, racer_speed
from racer_engine.core.registry import RacerRegistry, sample_registry, top_speed
from racer_engine.core.score import RacingScore

__all__ = [
    "DEFAULT_MOTORCYCLE_SPEED",
    "FlappyBird",
    "InvalidFlightStateError",
    "Motorcycle",
    "PENGUIN_SPEED",
    "Penguin",
    "Racer",
    "RacerRegistry",
    "RacingScore",
    "SwiftBird",
    "UnladenSwallow",
    "airspeed_velocity",
    "racer_speed",
    "sample_registry",
    "top_speed",
]
