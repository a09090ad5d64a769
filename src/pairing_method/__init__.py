"""Pairing Method - deterministic structural food and wine pairing."""

from pairing_method.engine import calculate_pairing, score_pairing
from pairing_method.schema import FoodAttributes, WineAttributes, PairingResult
from pairing_method.session import PairingSession

__version__ = "0.1.0"

__all__ = [
    'calculate_pairing',
    'score_pairing',
    'FoodAttributes',
    'WineAttributes',
    'PairingResult',
    'PairingSession',
    '__version__'
]
