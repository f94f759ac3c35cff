#!/usr/bin/env python3
"""
Unit tests for the configuration manager.
"""

import unittest
import json
import tempfile
import sys
import os

# Add package to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from flightcore.config import Config
from flightcore.math.constants import DEFAULT_DT, DEFAULT_FILTER_K

class TestConfig(unittest.TestCase):
    """Test Config class."""

    def setUp(self):
        """Set up temporary directory for config files."""
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, "flightcore.json")

    def tearDown(self):
        self.tmpdir.cleanup()

    def write(self, data):
        with open(self.path, 'w') as f:
            if isinstance(data, str):
                f.write(data)
            else:
                json.dump(data, f)

    def test_defaults_when_missing(self):
        """Test missing file leaves defaults in place and creates nothing."""
        config = Config(self.path)

        self.assertEqual(config.dt, DEFAULT_DT)
        self.assertEqual(config.filter_k, DEFAULT_FILTER_K)
        self.assertFalse(os.path.exists(self.path))
        self.assertEqual(config.validate(), [])

    def test_defaults_not_shared(self):
        """Test instances do not modify the class defaults."""
        config = Config(self.path)
        config.set("tick.dt", 1.0)
        self.assertEqual(Config.DEFAULT_CONFIG["tick"]["dt"], DEFAULT_DT)

    def test_partial_override(self):
        """Test file values are merged over defaults."""
        self.write({"tick": {"dt": 0.05}, "control": {"limit": 0.5}})
        config = Config(self.path)

        self.assertEqual(config.dt, 0.05)
        self.assertEqual(config.control_limit, 0.5)
        self.assertEqual(config.history_length, 4)
        self.assertEqual(config.filter_k, DEFAULT_FILTER_K)

    def test_invalid_json(self):
        """Test unreadable file keeps defaults."""
        self.write("{not json")
        config = Config(self.path)

        self.assertFalse(config.load_config())
        self.assertEqual(config.dt, DEFAULT_DT)

    def test_non_object_json(self):
        """Test non-object top level is rejected."""
        self.write([1, 2, 3])
        config = Config(self.path)

        self.assertFalse(config.load_config())
        self.assertEqual(config.dt, DEFAULT_DT)

    def test_section_replaced_by_scalar(self):
        """Test a section given as a non-object is rejected and defaults kept."""
        self.write({"tick": 5, "filter": {"k": 9.0}})
        config = Config(self.path)

        self.assertFalse(config.load_config())
        self.assertEqual(config.dt, DEFAULT_DT)
        self.assertEqual(config.history_length, 4)
        self.assertEqual(config.filter_k, DEFAULT_FILTER_K)
        self.assertEqual(config.validate(), [])

    def test_unknown_section_kept(self):
        """Test sections outside the defaults are carried along."""
        self.write({"gains": {"pitch": 2.0}})
        config = Config(self.path)

        self.assertEqual(config.get("gains.pitch"), 2.0)
        self.assertEqual(config.validate(), [])

    def test_non_numeric_values_reported(self):
        """Test values that are not numbers are reported, not compared."""
        self.write({"tick": {"dt": "fast"}, "filter": {"k": None},
                    "control": {"limit": True}})
        config = Config(self.path)

        problems = config.validate()
        self.assertEqual(len(problems), 3)
        self.assertTrue(any("tick.dt must be a number" in p for p in problems))
        self.assertTrue(any("filter.k must be a number" in p for p in problems))
        self.assertTrue(any("control.limit must be a number" in p for p in problems))

    def test_set_requires_section(self):
        """Test keys without a section are rejected."""
        config = Config(self.path)
        with self.assertRaises(KeyError):
            config.set("dt", 0.1)

    def test_save_and_reload(self):
        """Test saved values are read back."""
        config = Config(self.path)
        config.set("filter.k", 7.5)
        self.assertTrue(config.save_config())

        reloaded = Config(self.path)
        self.assertEqual(reloaded.filter_k, 7.5)

    def test_get_set_dotted(self):
        """Test dotted key access."""
        config = Config(self.path)

        self.assertEqual(config.get("statistics.window"), 10)
        self.assertIsNone(config.get("statistics.missing"))
        self.assertEqual(config.get("no.such.key", 3), 3)

        config.set("custom.gain.pitch", 2.0)
        self.assertEqual(config.get("custom.gain.pitch"), 2.0)

    def test_validate(self):
        """Test invalid values are reported."""
        config = Config(self.path)
        config.set("tick.dt", 0.0)
        config.set("tick.history_length", 2)
        config.set("filter.k", -1.0)
        config.set("statistics.window", 0)

        problems = config.validate()
        self.assertEqual(len(problems), 4)
        self.assertTrue(any("tick.dt" in p for p in problems))
        self.assertTrue(any("filter.k" in p for p in problems))

if __name__ == '__main__':
    unittest.main()
