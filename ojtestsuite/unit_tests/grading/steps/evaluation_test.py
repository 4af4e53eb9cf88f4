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

"""Tests for the evaluation step."""

import unittest

from oj import RESULT_RUNTIME_ERROR, RESULT_TIME_LIMIT_EXCEEDED
from oj.grading.Sandbox import Sandbox
from oj.grading.steps import OUTPUT_FILENAME, evaluation_step
from ojtestsuite.unit_tests.grading.steps.fakesandbox import FakeSandbox


COMMAND = ["/s/target"]


class TestEvaluationStep(unittest.TestCase):

    def setUp(self):
        super().setUp()
        self.sandbox = FakeSandbox()

    def test_success(self):
        self.sandbox.fake_execute_data(Sandbox.EXIT_OK, time=500)
        success, result, info, stats = evaluation_step(
            self.sandbox, COMMAND, time_limit=1_000_000,
            stdin_redirect="/p/1.in")

        self.assertEqual(self.sandbox.stdin_file, "/p/1.in")
        self.assertEqual(self.sandbox.stdout_file, OUTPUT_FILENAME)
        self.assertEqual(self.sandbox.deadline, 1_000_000)
        self.assertTrue(success)
        self.assertIsNone(result)
        self.assertEqual(info, "")
        self.assertEqual(stats["execution_time"], 500)

    def test_nonzero_return(self):
        self.sandbox.fake_execute_data(Sandbox.EXIT_NONZERO_RETURN, 3,
                                       stderr=b"Segmentation fault\n")
        success, result, info, stats = evaluation_step(self.sandbox, COMMAND)

        self.assertFalse(success)
        self.assertEqual(result, RESULT_RUNTIME_ERROR)
        self.assertEqual(info, "Segmentation fault\n")

    def test_signal(self):
        self.sandbox.fake_execute_data(Sandbox.EXIT_SIGNAL, -9)
        success, result, info, stats = evaluation_step(self.sandbox, COMMAND)

        self.assertFalse(success)
        self.assertEqual(result, RESULT_RUNTIME_ERROR)
        self.assertEqual(stats["signal"], 9)

    def test_timeout(self):
        self.sandbox.fake_execute_data(Sandbox.EXIT_TIMEOUT, -9)
        success, result, info, stats = evaluation_step(
            self.sandbox, COMMAND, time_limit=2000)

        self.assertFalse(success)
        self.assertEqual(result, RESULT_TIME_LIMIT_EXCEEDED)
        self.assertEqual(info, "Time limit: 2000")
        # The reported time is the limit, not the measured one.
        self.assertEqual(stats["execution_time"], 2000)

    def test_negative_time_limit(self):
        with self.assertRaises(ValueError):
            evaluation_step(self.sandbox, COMMAND, time_limit=-1)
        self.assertEqual(self.sandbox.commands, [])


if __name__ == "__main__":
    unittest.main()
