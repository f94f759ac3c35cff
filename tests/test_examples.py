#!/usr/bin/env python3
"""
Tests for helpers in the usage example.
"""

import unittest
import numpy as np
import sys
import os

# Add example scripts to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'examples'))

from basic_usage import filter_rms

class TestFilterRms(unittest.TestCase):
    """Test RMS summary of the error ring buffer."""

    def test_nothing_recorded(self):
        """Test an empty run gives no summary instead of failing."""
        self.assertIsNone(filter_rms(np.zeros(10), 0))

    def test_partial_window(self):
        """Test only recorded ticks are averaged and counted."""
        errors = np.zeros(10)
        errors[:2] = [0.3, -0.4]

        rms, used = filter_rms(errors, 2)
        self.assertEqual(used, 2)
        self.assertAlmostEqual(rms, np.sqrt(0.125))

    def test_full_window(self):
        """Test wrapped ring buffer uses its whole length."""
        errors = np.full(4, 0.5)

        rms, used = filter_rms(errors, 37)
        self.assertEqual(used, 4)
        self.assertAlmostEqual(rms, 0.5)

if __name__ == '__main__':
    unittest.main()
