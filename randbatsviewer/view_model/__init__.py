"""Normalization of raw entry records into ordered display groups."""

from .builder import build_display_groups, format_residue_value, is_structured_value, parse_entry
from .types import (
    DEFAULT_EVS,
    DEFAULT_IVS,
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

__all__ = [
    "DEFAULT_EVS",
    "DEFAULT_IVS",
    "ChangedStatList",
    "DefaultEntry",
    "DisplayGroup",
    "EntryRecord",
    "InvalidGroup",
    "MalformedRoles",
    "Residue",
    "RolePartition",
    "RolePartitionedEntry",
    "SimpleList",
    "build_display_groups",
    "format_residue_value",
    "is_structured_value",
    "parse_entry",
]
