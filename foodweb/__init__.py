"""
Foodweb Encounter Model

A deterministic, side-effect-free model of pairwise encounters between
organisms. Each encounter is decided by diet classification, species identity
and vitality: one side eats the other, both breed, or nothing happens.

Architecture: organisms are immutable values. Callers own populations and
loops; this package only resolves encounters.
"""

__version__ = "0.1.0"

from .diet import Diet
from .organism import Organism
from .encounter import (
    EncounterResult,
    InvalidEncounterError,
    encounter,
    encounter_series,
)

__all__ = [
    "Diet",
    "Organism",
    "EncounterResult",
    "InvalidEncounterError",
    "encounter",
    "encounter_series",
]
