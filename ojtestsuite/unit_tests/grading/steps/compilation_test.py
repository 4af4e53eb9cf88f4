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

"""Tests for the compilation step."""

import unittest

from oj import RESULT_COMPILATION_ERROR, RESULT_COMPILATION_SUCCESS
from oj.grading import JobException
from oj.grading.Sandbox import Sandbox
from oj.grading.steps import compilation_command, compilation_step
from ojtestsuite.unit_tests.grading.steps.fakesandbox import FakeSandbox


COMMAND = ["gcc", "%INPUT%", "-o", "%OUTPUT%"]


class TestCompilationCommand(unittest.TestCase):

    def test_substitution(self):
        self.assertEqual(
            compilation_command(COMMAND, "/s/main.c", "/s/target"),
            ["gcc", "/s/main.c", "-o", "/s/target"])

    def test_no_placeholders(self):
        self.assertEqual(compilation_command(["true"], "a", "b"), ["true"])


class TestCompilationStep(unittest.TestCase):

    def setUp(self):
        super().setUp()
        self.sandbox = FakeSandbox()

    def test_success(self):
        self.sandbox.fake_execute_data(Sandbox.EXIT_OK, time=1234,
                                       stderr=b"warning: unused")
        success, result, info, stats = compilation_step(
            self.sandbox, ["gcc", "main.c"])

        self.assertEqual(self.sandbox.commands, [["gcc", "main.c"]])
        # No deadline for the compiler.
        self.assertEqual(self.sandbox.deadline, 0)
        self.assertTrue(success)
        self.assertEqual(result, RESULT_COMPILATION_SUCCESS)
        self.assertEqual(info, "")
        self.assertEqual(stats["execution_time"], 1234)
        self.assertEqual(stats["stderr"], "warning: unused")

    def test_failure_nonzero_return(self):
        self.sandbox.fake_execute_data(Sandbox.EXIT_NONZERO_RETURN, 1,
                                       stderr="错误\n".encode("utf-8"))
        success, result, info, stats = compilation_step(
            self.sandbox, ["gcc", "main.c"])

        self.assertFalse(success)
        self.assertEqual(result, RESULT_COMPILATION_ERROR)
        self.assertEqual(info, "错误\n")
        self.assertEqual(stats["exit_code"], 1)

    def test_failure_signal(self):
        self.sandbox.fake_execute_data(Sandbox.EXIT_SIGNAL, -11)
        success, result, info, stats = compilation_step(
            self.sandbox, ["gcc", "main.c"])

        self.assertFalse(success)
        self.assertEqual(result, RESULT_COMPILATION_ERROR)
        self.assertEqual(stats["signal"], 11)

    def test_spawn_failure(self):
        self.sandbox.fake_execute_data(Sandbox.EXIT_OK, spawn_error=True)
        with self.assertRaises(JobException):
            compilation_step(self.sandbox, ["missing-compiler"])


if __name__ == "__main__":
    unittest.main()
