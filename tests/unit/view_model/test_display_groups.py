"""Tests for record parsing and display-group construction.

Pins group order, default/role shape dispatch, stat delta filtering,
residue collection, and per-group failure isolation.
"""

from __future__ import annotations

import unittest

from randbatsviewer.view_model import (
    ChangedStatList,
    DefaultEntry,
    InvalidGroup,
    MalformedRoles,
    Residue,
    RolePartition,
    RolePartitionedEntry,
    SimpleList,
    build_display_groups,
    format_residue_value,
    is_structured_value,
    parse_entry,
)


class ParseEntryTests(unittest.TestCase):
    def test_record_without_roles_is_default_entry(self) -> None:
        entry = parse_entry({"level": 80, "abilities": ["Blaze"], "notes": "x"})
        self.assertIsInstance(entry, DefaultEntry)
        assert isinstance(entry, DefaultEntry)
        self.assertEqual(entry.level, 80)
        self.assertEqual(entry.residue, (("notes", "x"),))

    def test_record_with_roles_is_role_partitioned(self) -> None:
        entry = parse_entry({"level": 80, "roles": {"Setup Sweeper": {"moves": ["Swords Dance"]}}})
        self.assertIsInstance(entry, RolePartitionedEntry)
        assert isinstance(entry, RolePartitionedEntry)
        self.assertEqual([role for role, _ in entry.roles], ["Setup Sweeper"])
        self.assertEqual(entry.roles[0][1].moves, ["Swords Dance"])

    def test_roles_of_wrong_shape_are_reported(self) -> None:
        self.assertIsInstance(parse_entry({"roles": ["a"]}), MalformedRoles)
        self.assertIsInstance(parse_entry({"roles": {"Wall": "oops"}}), MalformedRoles)

    def test_null_roles_fall_back_to_default_set(self) -> None:
        record = {"roles": None, "abilities": ["Static"], "moves": ["Thunderbolt"]}

        entry = parse_entry(record)
        groups = build_display_groups(record)

        self.assertIsInstance(entry, DefaultEntry)
        self.assertEqual(entry.residue, (("roles", None),))
        self.assertEqual(groups[0], SimpleList(label="Abilities", items=("Static",)))
        self.assertEqual(groups[2], SimpleList(label="Movepool", items=("Thunderbolt",)))
        self.assertEqual(groups[-1], Residue(entries=(("roles", None),)))


class BuildDisplayGroupsTests(unittest.TestCase):
    def test_default_entry_group_order(self) -> None:
        record = {
            "level": 83,
            "abilities": ["Static"],
            "items": ["Light Ball"],
            "moves": ["Thunderbolt", "Quick Attack"],
            "teraTypes": ["Electric", "Grass"],
            "evs": {"hp": 84, "atk": 0},
            "ivs": {"atk": 0, "spe": 31},
            "notes": "x",
        }
        groups = build_display_groups(record)
        self.assertEqual(
            groups,
            (
                SimpleList("Abilities", ("Static",)),
                SimpleList("Items", ("Light Ball",)),
                SimpleList("Movepool", ("Thunderbolt", "Quick Attack")),
                SimpleList("Tera Types", ("Electric", "Grass")),
                ChangedStatList("EVs", (("ATK", 0),)),
                ChangedStatList("IVs", (("ATK", 0),)),
                Residue((("notes", "x"),)),
            ),
        )

    def test_missing_fields_default_to_empty_lists(self) -> None:
        groups = build_display_groups({})
        self.assertEqual(
            groups,
            (
                SimpleList("Abilities", ()),
                SimpleList("Items", ()),
                SimpleList("Movepool", ()),
            ),
        )

    def test_changed_evs_only_lists_non_default_stats(self) -> None:
        groups = build_display_groups({"evs": {"hp": 84, "atk": 252}})
        self.assertIn(ChangedStatList("EVs", (("ATK", 252),)), groups)

    def test_stat_order_follows_record_key_order(self) -> None:
        groups = build_display_groups({"evs": {"spe": 0, "atk": 0, "def": 0}})
        self.assertEqual(groups[-1], ChangedStatList("EVs", (("SPE", 0), ("ATK", 0), ("DEF", 0))))

    def test_all_default_stats_emit_no_stat_groups(self) -> None:
        groups = build_display_groups({"evs": {"hp": 84}, "ivs": {"hp": 31}})
        self.assertFalse(any(isinstance(group, ChangedStatList) for group in groups))

    def test_empty_tera_types_are_omitted(self) -> None:
        groups = build_display_groups({"teraTypes": []})
        self.assertNotIn("Tera Types", [getattr(group, "label", None) for group in groups])

    def test_duplicate_moves_are_preserved(self) -> None:
        groups = build_display_groups({"moves": ["Protect", "Protect"]})
        self.assertEqual(groups[2], SimpleList("Movepool", ("Protect", "Protect")))

    def test_recognized_fields_never_appear_in_residue(self) -> None:
        record = {
            "level": 1,
            "abilities": [],
            "items": [],
            "moves": [],
            "teraTypes": [],
            "evs": {},
            "ivs": {},
            "notes": "x",
        }
        residue = [group for group in build_display_groups(record) if isinstance(group, Residue)]
        self.assertEqual(residue, [Residue((("notes", "x"),))])

    def test_residue_keeps_original_key_order(self) -> None:
        groups = build_display_groups({"zeta": 1, "moves": [], "alpha": {"a": 1}, "mid": None})
        self.assertEqual(groups[-1], Residue((("zeta", 1), ("alpha", {"a": 1}), ("mid", None))))

    def test_roles_yield_one_partition_per_role_in_order(self) -> None:
        record = {
            "level": 85,
            "roles": {
                "Attacker": {"abilities": ["Intimidate"], "moves": ["Earthquake"]},
                "Wall": {"abilities": ["Intimidate"], "evs": {"atk": 0}},
            },
            "notes": "ignored beside roles",
        }
        groups = build_display_groups(record)
        self.assertEqual(len(groups), 2)
        self.assertTrue(all(isinstance(group, RolePartition) for group in groups))
        attacker, wall = groups
        assert isinstance(attacker, RolePartition) and isinstance(wall, RolePartition)
        self.assertEqual(attacker.role, "Attacker")
        self.assertEqual(
            attacker.groups,
            (
                SimpleList("Abilities", ("Intimidate",)),
                SimpleList("Items", ()),
                SimpleList("Movepool", ("Earthquake",)),
            ),
        )
        self.assertEqual(wall.role, "Wall")
        self.assertEqual(wall.groups[-1], ChangedStatList("EVs", (("ATK", 0),)))

    def test_nested_roles_inside_a_role_are_residue(self) -> None:
        groups = build_display_groups({"roles": {"Outer": {"roles": {"Inner": {}}}}})
        outer = groups[0]
        assert isinstance(outer, RolePartition)
        self.assertEqual(outer.groups[-1], Residue((("roles", {"Inner": {}}),)))

    def test_accepts_parsed_entries(self) -> None:
        entry = parse_entry({"abilities": ["Static"]})
        self.assertEqual(build_display_groups(entry), build_display_groups({"abilities": ["Static"]}))

    def test_malformed_field_only_invalidates_its_own_group(self) -> None:
        groups = build_display_groups({"abilities": "Static", "items": ["Leftovers"], "evs": {"atk": "max"}})
        self.assertIsInstance(groups[0], InvalidGroup)
        self.assertEqual(groups[0].label, "Abilities")
        self.assertEqual(groups[1], SimpleList("Items", ("Leftovers",)))
        self.assertEqual(groups[2], SimpleList("Movepool", ()))
        self.assertIsInstance(groups[3], InvalidGroup)
        self.assertEqual(groups[3].label, "EVs")

    def test_malformed_roles_yield_single_invalid_group(self) -> None:
        groups = build_display_groups({"roles": "Attacker"})
        self.assertEqual(len(groups), 1)
        self.assertIsInstance(groups[0], InvalidGroup)
        self.assertEqual(groups[0].label, "Roles")


class ResidueFormattingTests(unittest.TestCase):
    def test_structured_values_render_as_indented_json(self) -> None:
        self.assertTrue(is_structured_value({"a": 1}))
        self.assertTrue(is_structured_value([1, 2]))
        self.assertEqual(format_residue_value({"a": [1, 2]}), '{\n  "a": [\n    1,\n    2\n  ]\n}')

    def test_scalars_render_inline(self) -> None:
        self.assertFalse(is_structured_value("x"))
        self.assertEqual(format_residue_value("x"), "x")
        self.assertEqual(format_residue_value(12), "12")
        self.assertEqual(format_residue_value(True), "true")
        self.assertEqual(format_residue_value(None), "null")


if __name__ == "__main__":
    unittest.main()
