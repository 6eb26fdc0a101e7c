"""
Encounter resolution.

An encounter pairs two organisms and returns both resolved states plus an
optional offspring. A series folds encounters left to right against a single
protagonist; the fold is neither commutative nor associative because every
outcome depends on the protagonist's accumulated vitality.
"""

from typing import NamedTuple, Optional

from .organism import Organism


class InvalidEncounterError(ValueError):
    """Raised when neither participant can eat anything (plant meets plant)"""
    pass


class EncounterResult(NamedTuple):
    """Resolved encounter: both participants and the offspring, if any"""
    first: Organism
    second: Organism
    offspring: Optional[Organism] = None


def validate_encounter(organism1: Organism, organism2: Organism):
    """
    Check that at least one participant can eat something.

    Raises:
        InvalidEncounterError: if both participants are plants
    """
    if not (organism1.diet.is_eater() or organism2.diet.is_eater()):
        raise InvalidEncounterError(
            f"Encounter needs at least one eater: {organism1.species!r} and "
            f"{organism2.species!r} are both plants"
        )


def encounter(organism1: Organism, organism2: Organism) -> EncounterResult:
    """
    Resolve a single encounter between two organisms.

    Outcomes, checked in order:
        - Either participant dead: both returned unchanged, no offspring
        - Same diet and same species: both unchanged, offspring bred from
          organism1 and organism2
        - Otherwise predation: each side eats against the other's original
          (pre-encounter) state, no offspring

    Args:
        organism1: First participant
        organism2: Second participant

    Returns:
        EncounterResult(first, second, offspring)

    Raises:
        InvalidEncounterError: if both participants are plants
        OverflowError: if a resulting vitality exceeds VITALITY_MAX
    """
    validate_encounter(organism1, organism2)

    if organism1.is_dead() or organism2.is_dead():
        return EncounterResult(organism1, organism2, None)

    if organism1.diet is organism2.diet and organism1.species == organism2.species:
        return EncounterResult(organism1, organism2, organism1.breed(organism2))

    return EncounterResult(organism1.eat(organism2), organism2.eat(organism1), None)


def encounter_series(protagonist: Organism, *others: Organism) -> Organism:
    """
    Run the protagonist through encounters with `others`, in order.

    Only the protagonist's resolved state is carried forward; each
    opponent's result and any offspring are discarded.

    Example:
        bear = Organism("bear", 10, Diet.OMNIVORE)
        encounter_series(bear, berries, wolf)   # berries first, then wolf

    Returns:
        Protagonist after the last encounter (unchanged if `others` is empty)
    """
    current = protagonist
    for other in others:
        current = encounter(current, other).first
    return current
