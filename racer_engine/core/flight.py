"""Flight capability for the racer engine.

Flying birds expose an ``airspeed_velocity`` computed at access time.
Whether a bird may be asked for it is decided by its ``can_fly`` flag,
which every bird carries explicitly.
"""

from __future__ import annotations

from typing import Any


class InvalidFlightStateError(RuntimeError):
    """Raised when a flight speed is requested from an entity that has none.

    The only variant that legitimately reaches this is
    ``UnladenSwallow.UNKNOWN``; racer-speed code checks ``can_fly`` first
    and never triggers it.
    """


def airspeed_velocity(bird: Any) -> float:
    """Return the flight speed of *bird*.

    Args:
        bird: Any bird exposing ``name`` and ``can_fly``.

    Returns:
        Airspeed velocity of the bird.

    Raises:
        InvalidFlightStateError: If ``bird.can_fly`` is ``False``.
    """
    if not bird.can_fly:
        raise InvalidFlightStateError(f"{bird.name} has no airspeed velocity.")
    return float(bird.airspeed_velocity)
