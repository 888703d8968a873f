"""Racer roster engine: birds and vehicles ranked by speed."""

__version__ = "0.1.0"
