"""Tests for bird models and flight capability."""

import pytest

from racer_engine.core.bird import FlappyBird, Penguin, SwiftBird, UnladenSwallow
from racer_engine.core.flight import InvalidFlightStateError, airspeed_velocity

# ---------------------------------------------------------------------------
# FlappyBird
# ---------------------------------------------------------------------------


def test_flappy_bird_speed_is_three_times_amplitude_times_frequency() -> None:
    bird = FlappyBird(name="Felipe", flappy_amplitude=3.0, flappy_frequency=20.0)
    assert bird.airspeed_velocity == 180.0
    assert bird.speed == 180.0


def test_flappy_bird_rejects_negative_amplitude() -> None:
    with pytest.raises(ValueError):
        FlappyBird(name="Felipe", flappy_amplitude=-1.0, flappy_frequency=20.0)


def test_flappy_bird_is_immutable() -> None:
    bird = FlappyBird(name="Felipe", flappy_amplitude=3.0, flappy_frequency=20.0)
    with pytest.raises(AttributeError):
        bird.flappy_amplitude = 4.0  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Penguin
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("name", ["King Penguin", "Emperor Penguin", "Rockhopper"])
def test_penguin_speed_is_constant(name: str) -> None:
    assert Penguin(name=name).speed == 42.0


def test_penguin_cannot_fly() -> None:
    penguin = Penguin(name="King Penguin")
    assert penguin.can_fly is False
    assert str(penguin) == "I am a King Penguin and I can't fly!"


def test_penguin_has_no_airspeed() -> None:
    with pytest.raises(InvalidFlightStateError):
        airspeed_velocity(Penguin(name="King Penguin"))


def test_penguin_requires_name() -> None:
    with pytest.raises(ValueError):
        Penguin(name="")


# ---------------------------------------------------------------------------
# SwiftBird
# ---------------------------------------------------------------------------


def test_swift_bird_speed_scales_with_version() -> None:
    assert SwiftBird(version=3.0).speed == 3000.0
    assert SwiftBird(version=4.0).speed > SwiftBird(version=3.0).speed


def test_swift_bird_name_and_description() -> None:
    bird = SwiftBird(version=3.0)
    assert bird.name == "Swift 3.0"
    assert bird.description == "I am a Swift 3.0 and I can fly!"


# ---------------------------------------------------------------------------
# UnladenSwallow
# ---------------------------------------------------------------------------


def test_swallow_speeds() -> None:
    assert UnladenSwallow.AFRICAN.speed == 10.0
    assert UnladenSwallow.EUROPEAN.speed == 9.9


def test_unknown_swallow_races_at_zero() -> None:
    """The racing speed of an unknown swallow never touches its airspeed."""
    assert UnladenSwallow.UNKNOWN.can_fly is False
    assert UnladenSwallow.UNKNOWN.speed == 0.0


def test_unknown_swallow_airspeed_is_invalid() -> None:
    with pytest.raises(InvalidFlightStateError):
        UnladenSwallow.UNKNOWN.airspeed_velocity
    with pytest.raises(InvalidFlightStateError):
        airspeed_velocity(UnladenSwallow.UNKNOWN)


def test_swallow_names() -> None:
    assert UnladenSwallow.AFRICAN.name == "African"
    assert UnladenSwallow.EUROPEAN.name == "European"
    assert str(UnladenSwallow.UNKNOWN) == (
        "I am a What do you mean? African or European? and I can't fly!"
    )


def test_airspeed_velocity_of_flying_birds() -> None:
    assert airspeed_velocity(UnladenSwallow.AFRICAN) == 10.0
    assert airspeed_velocity(SwiftBird(version=2.0)) == 2000.0


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_flappy_bird_rejects_non_finite_parameters(value: float) -> None:
    with pytest.raises(ValueError, match="finite"):
        FlappyBird(name="Felipe", flappy_amplitude=value, flappy_frequency=20.0)
    with pytest.raises(ValueError, match="finite"):
        FlappyBird(name="Felipe", flappy_amplitude=3.0, flappy_frequency=value)


def test_flappy_bird_rejects_negative_frequency() -> None:
    with pytest.raises(ValueError, match="flappy_frequency"):
        FlappyBird(name="Felipe", flappy_amplitude=3.0, flappy_frequency=-20.0)


def test_flappy_bird_requires_name() -> None:
    with pytest.raises(ValueError, match="name"):
        FlappyBird(name="", flappy_amplitude=3.0, flappy_frequency=20.0)


def test_swift_bird_rejects_negative_version() -> None:
    with pytest.raises(ValueError, match="version"):
        SwiftBird(version=-1.0)


@pytest.mark.parametrize("value", [float("nan"), float("inf")])
def test_swift_bird_rejects_non_finite_version(value: float) -> None:
    with pytest.raises(ValueError, match="finite"):
        SwiftBird(version=value)
