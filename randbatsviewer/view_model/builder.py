"""Build ordered display groups from one raw entry record.

``parse_entry`` classifies a raw mapping into the closed record union once;
``build_display_groups`` walks that union and emits groups in a fixed order.
Missing recognized fields default to empty containers. A recognized field with
the wrong shape becomes an ``InvalidGroup`` without aborting its siblings.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence

from .types import (
    DEFAULT_EVS,
    DEFAULT_IVS,
    RECOGNIZED_FIELDS,
    ROLES_FIELD,
    ChangedStatList,
    DefaultEntry,
    DisplayGroup,
    EntryRecord,
    InvalidGroup,
    MalformedRoles,
    Residue,
    RolePartition,
    RolePartitionedEntry,
    SimpleList,
)

ABILITIES_LABEL = "Abilities"
ITEMS_LABEL = "Items"
MOVEPOOL_LABEL = "Movepool"
TERA_TYPES_LABEL = "Tera Types"
EVS_LABEL = "EVs"
IVS_LABEL = "IVs"
ROLES_LABEL = "Roles"


def _parse_default(record: Mapping[str, object]) -> DefaultEntry:
    residue = tuple((key, value) for key, value in record.items() if key not in RECOGNIZED_FIELDS)
    return DefaultEntry(
        level=record.get("level"),
        abilities=record.get("abilities", ()),
        items=record.get("items", ()),
        moves=record.get("moves", ()),
        tera_types=record.get("teraTypes", ()),
        evs=record.get("evs", {}),
        ivs=record.get("ivs", {}),
        residue=residue,
    )


def parse_entry(record: Mapping[str, object]) -> EntryRecord:
    """Classify a raw record as role-partitioned or a single default set.

    A missing or ``null`` ``roles`` means a default set; a ``null`` value is
    kept as residue. Role records are always parsed as default sets, so a
    ``roles`` key nested inside a role is ordinary residue.
    """
    level = record.get("level")
    if record.get(ROLES_FIELD) is None:
        return _parse_default(record)

    raw_roles = record[ROLES_FIELD]
    if not isinstance(raw_roles, Mapping):
        return MalformedRoles(level=level, error=f"expected a mapping, got {type(raw_roles).__name__}")
    roles: list[tuple[str, DefaultEntry]] = []
    for role, role_record in raw_roles.items():
        if not isinstance(role_record, Mapping):
            return MalformedRoles(
                level=level,
                error=f"role {role!r}: expected a mapping, got {type(role_record).__name__}",
            )
        roles.append((str(role), _parse_default(role_record)))
    return RolePartitionedEntry(level=level, roles=tuple(roles))


def _string_list(label: str, value: object) -> SimpleList | InvalidGroup:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        return InvalidGroup(label=label, error=f"expected a list, got {type(value).__name__}")
    return SimpleList(label=label, items=tuple(str(item) for item in value))


def _changed_stats(label: str, value: object, default: int) -> ChangedStatList | InvalidGroup:
    if not isinstance(value, Mapping):
        return InvalidGroup(label=label, error=f"expected a mapping, got {type(value).__name__}")
    entries: list[tuple[str, int]] = []
    for stat, amount in value.items():
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            return InvalidGroup(label=label, error=f"stat {stat!r}: expected a number, got {type(amount).__name__}")
        if amount != default:
            entries.append((str(stat).upper(), amount))
    return ChangedStatList(label=label, entries=tuple(entries))


def _default_groups(entry: DefaultEntry) -> tuple[DisplayGroup, ...]:
    groups: list[DisplayGroup] = [
        _string_list(ABILITIES_LABEL, entry.abilities),
        _string_list(ITEMS_LABEL, entry.items),
        _string_list(MOVEPOOL_LABEL, entry.moves),
    ]

    tera = _string_list(TERA_TYPES_LABEL, entry.tera_types)
    if not isinstance(tera, SimpleList) or tera.items:
        groups.append(tera)

    for label, value, default in ((EVS_LABEL, entry.evs, DEFAULT_EVS), (IVS_LABEL, entry.ivs, DEFAULT_IVS)):
        stats = _changed_stats(label, value, default)
        if not isinstance(stats, ChangedStatList) or stats.entries:
            groups.append(stats)

    if entry.residue:
        groups.append(Residue(entries=entry.residue))
    return tuple(groups)


def build_display_groups(record: Mapping[str, object] | EntryRecord) -> tuple[DisplayGroup, ...]:
    """Return the ordered display groups for a raw record or parsed entry.

    ``level`` never appears in the result; callers surface it in the header.
    """
    entry = record if isinstance(record, (DefaultEntry, RolePartitionedEntry, MalformedRoles)) else parse_entry(record)
    if isinstance(entry, RolePartitionedEntry):
        return tuple(RolePartition(role=role, groups=_default_groups(role_entry)) for role, role_entry in entry.roles)
    if isinstance(entry, MalformedRoles):
        return (InvalidGroup(label=ROLES_LABEL, error=entry.error),)
    return _default_groups(entry)


def is_structured_value(value: object) -> bool:
    """Return whether a residue value renders as a nested literal."""
    return value is None or isinstance(value, (Mapping, list, tuple))


def format_residue_value(value: object) -> str:
    """Format one residue value: structured values as indented JSON, scalars inline."""
    if is_structured_value(value):
        return json.dumps(value, indent=2, ensure_ascii=False, default=str)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
