"""
test_file_utils.py

Tests for JSON export and the usernames loader. Everything is written to a
temporary directory.
"""

import json
import os
import tempfile
import unittest
from datetime import datetime

from file_utils import load_usernames, save_result_json
from scoring import AFFORDABILITY_TIERS


class TestSaveResultJson(unittest.TestCase):

    def test_writes_result_with_unbounded_tier(self):
        result = {
            "username": "octo",
            "hustle_score": 851,
            "naira_value": 2128000,
            "affordability_tier": dict(AFFORDABILITY_TIERS[-1]),
            "stats": {"languages": ["Go"]},
        }

        with tempfile.TemporaryDirectory() as tmp:
            reports_dir = os.path.join(tmp, "reports")
            path = save_result_json(result, reports_dir=reports_dir)

            self.assertTrue(os.path.basename(path).startswith("octo_worth_"))
            with open(path, "r", encoding="utf-8") as f:
                saved = json.load(f)

        self.assertEqual(saved["hustle_score"], 851)
        self.assertEqual(saved["affordability_tier"]["label"], "Recruiter Bait")
        self.assertIsNone(saved["affordability_tier"]["max_value"])
        self.assertEqual(saved["stats"]["languages"], ["Go"])

    def test_non_json_values_are_not_stringified(self):
        result = {"username": "octo", "fetched_at": datetime(2026, 1, 15)}

        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(TypeError):
                save_result_json(result, reports_dir=tmp)


class TestLoadUsernames(unittest.TestCase):

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            self.assertEqual(load_usernames(os.path.join(tmp, "nope.txt")), [])

    def test_skips_blank_and_comment_lines(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "usernames.txt")
            with open(path, "w", encoding="utf-8") as f:
                f.write("torvalds\n\n  # team\n  octocat  \n")

            self.assertEqual(load_usernames(path), ["torvalds", "octocat"])


if __name__ == "__main__":
    unittest.main()
