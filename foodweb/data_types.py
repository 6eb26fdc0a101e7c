"""
Data types mirroring the YAML roster schema.

These dataclasses are populated by loader.py from YAML files.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .organism import Organism


# ============================================================================
# Series Definition
# ============================================================================

@dataclass
class SeriesConfig:
    """An ordered run of encounters against one protagonist"""
    series_id: str
    protagonist: str  # Organism id within the roster
    others: List[str] = field(default_factory=list)  # Opponent ids, in encounter order
    description: Optional[str] = None


# ============================================================================
# Roster Definition
# ============================================================================

@dataclass
class Roster:
    """Named set of organisms plus the series configured over them"""
    roster_id: str
    name: str
    organisms: Dict[str, Organism]  # {organism_id: Organism}
    series: List[SeriesConfig] = field(default_factory=list)
    description: Optional[str] = None

    def members(self, series: SeriesConfig) -> Tuple[Organism, List[Organism]]:
        """
        Resolve a series' ids into organisms.

        Returns:
            (protagonist, opponents in encounter order)

        Raises:
            KeyError: if an id is not in this roster
        """
        protagonist = self.organisms[series.protagonist]
        others = [self.organisms[organism_id] for organism_id in series.others]
        return protagonist, others
