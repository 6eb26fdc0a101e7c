"""
YAML roster loader with schema validation.

Loads organism rosters and their encounter series from YAML files and
validates them against a JSON schema.
"""

import yaml
import json
from pathlib import Path
from typing import Dict, Optional
import jsonschema

from .data_types import Roster, SeriesConfig
from .organism import Organism
from .encounter import encounter_series
from .constants import ROSTER_SCHEMA_FILE, ROSTER_FILE_PATTERN


class DataLoadError(Exception):
    """Raised when data loading or validation fails"""
    pass


def load_yaml(file_path: Path) -> dict:
    """Load YAML file and return parsed dict"""
    file_path = Path(file_path)
    if not file_path.exists():
        raise DataLoadError(f"File not found: {file_path}")

    try:
        with open(file_path, 'r') as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise DataLoadError(f"YAML parse error in {file_path}: {e}")


def validate_against_schema(data: dict, schema_path: Path, data_path: Path):
    """Validate data dict against JSON schema"""
    if not schema_path.exists():
        # Schema validation is optional
        return

    try:
        with open(schema_path, 'r') as f:
            schema = json.load(f)
        jsonschema.validate(instance=data, schema=schema)
    except jsonschema.ValidationError as e:
        raise DataLoadError(f"Validation error in {data_path}: {e.message}")
    except json.JSONDecodeError as e:
        raise DataLoadError(f"Invalid JSON schema {schema_path}: {e}")


def load_roster(file_path: Path, schema_dir: Optional[Path] = None) -> Roster:
    """Load roster definition from YAML"""
    file_path = Path(file_path)
    data = load_yaml(file_path)

    if not isinstance(data, dict):
        raise DataLoadError(f"Roster file {file_path} must contain a mapping")

    # Validate if schema available
    if schema_dir:
        schema_path = Path(schema_dir) / ROSTER_SCHEMA_FILE
        validate_against_schema(data, schema_path, file_path)

    organisms = {}
    for index, o_data in enumerate(data.get('organisms', [])):
        try:
            organism_id = o_data['id']
        except (KeyError, TypeError):
            raise DataLoadError(f"Organism #{index} in {file_path} has no 'id'")
        if organism_id in organisms:
            raise DataLoadError(f"Duplicate organism id '{organism_id}' in {file_path}")
        try:
            organisms[organism_id] = Organism.from_dict(o_data)
        except KeyError as e:
            raise DataLoadError(f"Invalid organism '{organism_id}' in {file_path}: missing {e}")
        except (TypeError, ValueError) as e:
            raise DataLoadError(f"Invalid organism '{organism_id}' in {file_path}: {e}")

    if not organisms:
        print(f"[WARN] Roster {file_path} defines no organisms")

    series = []
    for index, s_data in enumerate(data.get('series', [])):
        try:
            config = SeriesConfig(
                series_id=s_data['id'],
                protagonist=s_data['protagonist'],
                others=list(s_data.get('others', [])),
                description=s_data.get('description')
            )
        except KeyError as e:
            raise DataLoadError(f"Series #{index} in {file_path} is missing {e}")
        unknown = [oid for oid in [config.protagonist] + config.others if oid not in organisms]
        if unknown:
            raise DataLoadError(
                f"Series '{config.series_id}' in {file_path} references unknown "
                f"organisms: {', '.join(map(str, unknown))}"
            )
        series.append(config)

    return Roster(
        roster_id=data['roster_id'],
        name=data.get('name', data['roster_id']),
        organisms=organisms,
        series=series,
        description=data.get('description')
    )


def load_roster_directory(roster_dir: Path, schema_dir: Optional[Path] = None) -> Dict[str, Roster]:
    """Load all rosters from directory"""
    roster_dir = Path(roster_dir)
    if not roster_dir.exists():
        raise DataLoadError(f"Roster directory not found: {roster_dir}")

    rosters = {}
    for yaml_file in sorted(roster_dir.glob(ROSTER_FILE_PATTERN)):
        roster = load_roster(yaml_file, schema_dir)
        rosters[roster.roster_id] = roster

    if not rosters:
        raise DataLoadError(f"No roster files found in {roster_dir}")

    return rosters


def run_roster_series(roster: Roster, verbose: bool = False) -> Dict[str, Organism]:
    """
    Resolve every configured series in a roster.

    Args:
        roster: Loaded roster
        verbose: Print one summary line per series

    Returns:
        Dict of series_id -> protagonist after its last encounter
    """
    results = {}
    for config in roster.series:
        protagonist, others = roster.members(config)
        final = encounter_series(protagonist, *others)
        results[config.series_id] = final

        if verbose:
            status = "dead" if final.is_dead() else "alive"
            print(f"[OK] {roster.roster_id}/{config.series_id}: "
                  f"{config.protagonist} after {len(others)} encounters -> {status} "
                  f"{json.dumps(final.to_dict())}")

    return results
