"""Racing score value type."""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class RacingScore:
    """Totally ordered racing score.

    Attributes:
        value: Integer score; higher is better.
    """

    value: int
