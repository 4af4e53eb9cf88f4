#!/usr/bin/env python3

# Online Judge - a judging pipeline and ranking engine
# Copyright © 2022-2026 The OJ development team
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as
# published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

"""Tests for the fixed case messages."""

import unittest

from oj.grading.steps import EVALUATION_MESSAGES, HumanMessage, \
    MessageCollection


class TestMessageCollection(unittest.TestCase):

    def test_format(self):
        self.assertEqual(EVALUATION_MESSAGES.get("timeout").format(2000),
                         "Time limit: 2000")
        self.assertEqual(HumanMessage("x", "100%").format(), "100%")

    def test_unknown(self):
        with self.assertRaises(KeyError):
            EVALUATION_MESSAGES.get("nope")

    def test_duplicate(self):
        with self.assertRaises(ValueError):
            MessageCollection([HumanMessage("a", "1"), HumanMessage("a", "2")])


if __name__ == "__main__":
    unittest.main()
