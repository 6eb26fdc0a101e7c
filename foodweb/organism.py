"""
Organism value type.

Organisms are immutable: eating and breeding return new Organism values and
never touch their inputs. Diet is fixed for an organism's whole lifetime.
"""

import numbers
from dataclasses import dataclass, replace
from typing import Any

from .diet import Diet
from .arithmetic import checked_add, floor_half, floor_midpoint
from .constants import VITALITY_MIN, VITALITY_MAX, DEAD_VITALITY


@dataclass(frozen=True)
class Organism:
    """
    Organism taking part in encounters.

    Attributes:
        species: Species identifier (compared by equality only, e.g. "fox")
        vitality: Non-negative integer strength; 0 means dead
        diet: Diet classification (a Diet or its name, e.g. "omnivore")
    """
    species: Any
    vitality: int
    diet: Diet

    def __post_init__(self):
        """Normalize vitality to builtin int and diet to Diet"""
        vitality = self.vitality
        if isinstance(vitality, bool) or not isinstance(vitality, numbers.Integral):
            raise TypeError(f"Vitality must be an integer, got {type(vitality).__name__}")

        # Cast to builtin int to avoid numpy types
        vitality = int(vitality)
        if not VITALITY_MIN <= vitality <= VITALITY_MAX:
            raise ValueError(
                f"Vitality {vitality} outside [{VITALITY_MIN}, {VITALITY_MAX}]"
            )

        object.__setattr__(self, 'vitality', vitality)
        object.__setattr__(self, 'diet', Diet.from_name(self.diet))

    def is_dead(self) -> bool:
        return self.vitality == DEAD_VITALITY

    def with_vitality(self, vitality: int) -> 'Organism':
        """Copy of this organism with a new vitality (species and diet kept)"""
        return replace(self, vitality=vitality)

    def eat(self, other: 'Organism') -> 'Organism':
        """
        Resolve this organism's side of a predation attempt against `other`.

        Only this side is computed; the caller evaluates other.eat(self)
        separately, against the original value of self.

        Order of evaluation (first match wins):
            1. Self can eat other's kind:
               - other is a plant: absorb all of its vitality
               - other is an animal and strictly weaker: gain half of its
                 vitality (rounded down); otherwise fall through
            2. Other can eat self's kind and self is a plant, or other is
               strictly stronger, or self could eat other and they tie:
               self dies
            3. Nothing happens: self is returned unchanged

        Args:
            other: Opponent in its pre-encounter state

        Returns:
            Resulting Organism for this side

        Raises:
            OverflowError: if the gained vitality exceeds VITALITY_MAX
        """
        self_is_plant = self.diet.is_plant()
        other_is_plant = other.diet.is_plant()
        self_can_eat = self.diet.can_eat(other.diet)
        other_can_eat = other.diet.can_eat(self.diet)

        if self_can_eat:
            if other_is_plant:
                return self.with_vitality(checked_add(self.vitality, other.vitality))
            if self.vitality > other.vitality:
                return self.with_vitality(
                    checked_add(self.vitality, floor_half(other.vitality))
                )

        if other_can_eat:
            tie = self_can_eat and other.vitality == self.vitality
            if self_is_plant or other.vitality > self.vitality or tie:
                return self.with_vitality(DEAD_VITALITY)

        return self

    def breed(self, other: 'Organism') -> 'Organism':
        """
        Produce offspring with `other`.

        The offspring has this organism's species and diet and the midpoint
        of both vitalities, rounded toward the smaller one. Species matching
        is checked by encounter(), not here.
        """
        return replace(self, vitality=floor_midpoint(self.vitality, other.vitality))

    def __add__(self, other: 'Organism') -> 'Organism':
        """a + b is this organism after encountering b (first result only)"""
        if not isinstance(other, Organism):
            return NotImplemented
        from .encounter import encounter
        return encounter(self, other).first

    def to_dict(self) -> dict:
        """
        Serialize organism to JSON-compatible dict.

        Returns:
            Dict with species, vitality and lowercase diet name
        """
        return {
            'species': self.species,
            'vitality': self.vitality,
            'diet': self.diet.name.lower()
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Organism':
        """
        Deserialize organism from dict.

        Args:
            data: Dict with species, vitality and diet

        Returns:
            Organism instance
        """
        return cls(
            species=data['species'],
            vitality=data['vitality'],
            diet=data['diet']
        )
