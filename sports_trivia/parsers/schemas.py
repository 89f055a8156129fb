"""
Declarative column schemas for the player CSV files.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, List, Mapping, Optional


class ColumnType(str, Enum):
    """Closed set of column kinds; each kind has exactly one coercer."""
    STRING = 'string'
    NUMBER = 'number'
    INTEGER = 'integer'
    FLOAT = 'float'
    BOOLEAN = 'boolean'
    DATE = 'date'


@dataclass(frozen=True)
class ColumnSchema:
    """Type and constraints for one CSV column."""
    type: ColumnType = ColumnType.STRING
    required: bool = False
    default: Any = None
    nullable: bool = False
    min: Optional[float] = None
    max: Optional[float] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    pattern: Optional[str] = None
    enum: Optional[FrozenSet[str]] = None

    @property
    def has_default(self) -> bool:
        return self.default is not None


@dataclass(frozen=True)
class Schema:
    """Named, read-only mapping of column name to ColumnSchema."""
    name: str
    columns: Mapping[str, ColumnSchema] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, 'columns', MappingProxyType(dict(self.columns)))

    @property
    def required_columns(self) -> List[str]:
        return [name for name, column in self.columns.items() if column.required]

    def __contains__(self, column: str) -> bool:
        return column in self.columns

    def __getitem__(self, column: str) -> ColumnSchema:
        return self.columns[column]


def _string(**kwargs) -> ColumnSchema:
    return ColumnSchema(type=ColumnType.STRING, required=True, **kwargs)


def _integer(**kwargs) -> ColumnSchema:
    return ColumnSchema(type=ColumnType.INTEGER, required=True, **kwargs)


def _float(**kwargs) -> ColumnSchema:
    return ColumnSchema(type=ColumnType.FLOAT, required=True, **kwargs)


MLB_PLAYER = Schema('MLB_PLAYER', {
    'Player': _string(min_length=1),
    'League': _string(enum=frozenset({'AL', 'NL'})),
    'Team': _string(min_length=2),
    'Age': _integer(min=18, max=50),
    'Runs': _integer(min=0),
    'SB': _integer(min=0),
    'HR': _integer(min=0),
    'OPS': _float(min=0.0, max=2.0),
})

NFL_PLAYER = Schema('NFL_PLAYER', {
    'Player': _string(min_length=1),
    'Age': _integer(min=18, max=50),
    'Conference': _string(enum=frozenset({'AFC', 'NFC'})),
    'Team': _string(min_length=2),
    'Position': _string(),
    'Rec Yds': _integer(min=0),
    'Rush Yds': _integer(min=0),
    'TDs': _integer(min=0),
})

NBA_PLAYER = Schema('NBA_PLAYER', {
    'Player': _string(min_length=1),
    'Conference': _string(enum=frozenset({'Eastern', 'Western'})),
    'Team': _string(min_length=2),
    'Position': _string(),
    'Age': _integer(min=18, max=50),
    'PTS': _float(min=0),
    'REB': _float(min=0),
    'AST': _float(min=0),
})

SCHEMAS: Dict[str, Schema] = {
    schema.name: schema for schema in (MLB_PLAYER, NFL_PLAYER, NBA_PLAYER)
}


def get_schema(name: str) -> Schema:
    """Look up a predefined schema by name (case-insensitive)."""
    key = name.upper().replace('-', '_')
    if key not in SCHEMAS:
        raise KeyError(f"Unknown schema: {name} (expected one of {', '.join(SCHEMAS)})")
    return SCHEMAS[key]
