"""Directional signal provider"""

from .client import PredictionClient, parse_signal

__all__ = ["PredictionClient", "parse_signal"]
