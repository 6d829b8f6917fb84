"""Record and display-group types for the entry detail view.

Records are a closed union of ``DefaultEntry`` and ``RolePartitionedEntry``.
Display groups are frozen dataclasses tagged by their class.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

DEFAULT_EVS = 84
DEFAULT_IVS = 31

RECOGNIZED_FIELDS: frozenset[str] = frozenset(
    {"level", "abilities", "items", "moves", "teraTypes", "evs", "ivs"}
)
ROLES_FIELD = "roles"


@dataclass(frozen=True)
class DefaultEntry:
    """Single moveset: recognized fields by name plus unrecognized residue."""

    level: object | None
    abilities: object
    items: object
    moves: object
    tera_types: object
    evs: object
    ivs: object
    residue: tuple[tuple[str, object], ...] = ()


@dataclass(frozen=True)
class RolePartitionedEntry:
    """Entry split into named role variants, each a ``DefaultEntry``."""

    level: object | None
    roles: tuple[tuple[str, DefaultEntry], ...]


@dataclass(frozen=True)
class MalformedRoles:
    """Entry whose ``roles`` field is present but not a mapping of records."""

    level: object | None
    error: str


EntryRecord = Union[DefaultEntry, RolePartitionedEntry, MalformedRoles]


@dataclass(frozen=True)
class SimpleList:
    label: str
    items: tuple[str, ...]


@dataclass(frozen=True)
class ChangedStatList:
    """Stats whose value differs from the format default, names upper-cased."""

    label: str
    entries: tuple[tuple[str, int], ...]


@dataclass(frozen=True)
class Residue:
    """Unrecognized record fields in original key order."""

    entries: tuple[tuple[str, object], ...]


@dataclass(frozen=True)
class RolePartition:
    role: str
    groups: tuple[DisplayGroup, ...]


@dataclass(frozen=True)
class InvalidGroup:
    """Placeholder for a recognized field that does not have its expected shape."""

    label: str
    error: str


DisplayGroup = Union[SimpleList, ChangedStatList, Residue, RolePartition, InvalidGroup]
