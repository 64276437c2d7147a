"""Tests for the rule catalog and per-family label derivation."""

import unittest

from activity_report.rules import RULE_CATALOG
from activity_report.rules.base import Rule, family_rules
from activity_report.rules.chrome import chrome_details
from activity_report.rules.vscode import vscode_details, vscode_project

from conftest import make_period


def vscode(title):
    return make_period(0, 1000, "code", title=title)


class TestVSCodeRule(unittest.TestCase):
    """Test cases for Visual Studio Code title parsing."""

    def test_file_project_app(self):
        period = vscode("main.ts - myproj - Visual Studio Code")
        self.assertEqual(vscode_project(period), "myproj")
        self.assertEqual(vscode_details(period), "main.ts")

    def test_project_only(self):
        period = vscode("myproj - Visual Studio Code")
        self.assertEqual(vscode_project(period), "myproj")
        self.assertEqual(vscode_details(period), "")

    def test_bare_title(self):
        period = vscode("Visual Studio Code")
        self.assertEqual(vscode_project(period), "")
        self.assertEqual(vscode_details(period), "")

    def test_extra_separators_keep_full_title(self):
        title = "a - b.ts - myproj - Visual Studio Code"
        period = vscode(title)
        self.assertEqual(vscode_project(period), title)
        self.assertEqual(vscode_details(period), title)


class TestChromeRule(unittest.TestCase):
    """Test cases for Google Chrome details."""

    def test_suffix_removed(self):
        period = make_period(0, 1000, "chrome", title="Inbox - Google Chrome")
        self.assertEqual(chrome_details(period), "Inbox")

    def test_only_first_occurrence_removed(self):
        period = make_period(
            0, 1000, "chrome", title="A - Google Chrome - Google Chrome"
        )
        self.assertEqual(chrome_details(period), "A - Google Chrome")


class TestCatalog(unittest.TestCase):
    """Test cases for catalog ordering and contents."""

    def test_defaults_registered_last(self):
        default_positions = [i for i, rule in enumerate(RULE_CATALOG) if rule.is_default]
        self.assertEqual(
            default_positions, list(range(len(RULE_CATALOG) - 2, len(RULE_CATALOG)))
        )

    def test_one_default_per_supported_os(self):
        defaults = [rule.operating_system for rule in RULE_CATALOG if rule.is_default]
        self.assertEqual(sorted(defaults), ["linux", "win32"])

    def test_family_order(self):
        families = []
        for rule in RULE_CATALOG:
            if rule.family not in families:
                families.append(rule.family)
        self.assertEqual(families, ["self-track", "vscode", "chrome", "default"])

    def test_default_rule_labels(self):
        rule = next(r for r in RULE_CATALOG if r.is_default)
        period = make_period(0, 1000, "gimp", title="Untitled - GIMP")
        self.assertEqual(rule.program_label, "Unknown Software")
        self.assertEqual(rule.derive_project_label(period), "")
        self.assertEqual(rule.derive_details(period), "Untitled - GIMP")

    def test_self_track_labels_are_blank(self):
        rule = next(r for r in RULE_CATALOG if r.family == "self-track")
        period = make_period(0, 1000, "self-track", title="Self Track")
        self.assertEqual(rule.derive_details(period), "")
        self.assertEqual(rule.derive_project_label(period), "")


class TestFamilyRules(unittest.TestCase):
    """Test cases for the family_rules constructor."""

    def test_one_rule_per_os(self):
        rules = family_rules("term", "Terminal", {"linux": ["gnome-terminal"], "win32": []})
        self.assertEqual([r.operating_system for r in rules], ["linux", "win32"])
        self.assertFalse(rules[0].is_default)
        self.assertTrue(rules[1].is_default)

    def test_matching_is_case_sensitive_substring(self):
        rule = Rule("vscode", "linux", ("code",), "Visual Studio Code")
        self.assertTrue(rule.matches_executable("vscode-helper"))
        self.assertFalse(rule.matches_executable("Code"))


if __name__ == "__main__":
    unittest.main()
