"""
Diet classification.

A closed set of four capability profiles. Each profile states whether an
organism may eat meat (any non-plant) and whether it may eat plants.
"""

from enum import Enum


class Diet(Enum):
    """Capability profile: (can_eat_meat, can_eat_plants)"""
    PLANT = (False, False)
    HERBIVORE = (False, True)
    CARNIVORE = (True, False)
    OMNIVORE = (True, True)

    def __init__(self, can_eat_meat: bool, can_eat_plants: bool):
        self.can_eat_meat = can_eat_meat
        self.can_eat_plants = can_eat_plants

    def is_plant(self) -> bool:
        """True only for PLANT (eats nothing)"""
        return not self.can_eat_meat and not self.can_eat_plants

    def is_eater(self) -> bool:
        """True when the profile can eat something"""
        return not self.is_plant()

    def can_eat(self, other: 'Diet') -> bool:
        """
        Whether this diet permits eating an organism with diet `other`.

        Plants are eaten by plant eaters; every other kind counts as meat.
        """
        return self.can_eat_plants if other.is_plant() else self.can_eat_meat

    @classmethod
    def from_name(cls, name: str) -> 'Diet':
        """
        Look up a diet by name, case-insensitive (e.g. "carnivore").

        Raises:
            ValueError: if the name is not one of the four profiles
        """
        if isinstance(name, cls):
            return name
        try:
            return cls[str(name).strip().upper()]
        except KeyError:
            valid = ", ".join(d.name.lower() for d in cls)
            raise ValueError(f"Unknown diet '{name}' (expected one of: {valid})") from None
