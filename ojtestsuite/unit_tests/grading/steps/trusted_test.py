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

"""Tests for the verifier step."""

import unittest
from unittest.mock import patch

from oj import RESULT_ACCEPTED, RESULT_SPJ_ERROR, RESULT_WRONG_ANSWER
from oj.grading.Sandbox import Sandbox
from oj.grading.steps import VERIFIER_MESSAGES, extract_verdict_and_info, \
    verifier_command, verifier_step
from oj.grading.steps import trusted
from ojtestsuite.unit_tests.grading.steps.fakesandbox import FakeSandbox


INVALID_UTF8 = b"\xc3\x28"


COMMAND = ["checker", "--answer", "%ANSWER%", "%OUTPUT%"]


class TestVerifierCommand(unittest.TestCase):

    def test_substitution(self):
        self.assertEqual(
            verifier_command(COMMAND, "/a/1.ans", "/s/output"),
            ["checker", "--answer", "/a/1.ans", "/s/output"])

    def test_only_whole_tokens(self):
        self.assertEqual(
            verifier_command(["x%OUTPUT%", "%ANSWER%%OUTPUT%"], "a", "o"),
            ["x%OUTPUT%", "%ANSWER%%OUTPUT%"])


class TestExtractVerdictAndInfo(unittest.TestCase):

    def test_success(self):
        self.assertEqual(extract_verdict_and_info(b"Accepted\nok\n"),
                         (RESULT_ACCEPTED, "ok"))

    def test_lines_are_stripped(self):
        self.assertEqual(
            extract_verdict_and_info(b"  Wrong Answer \t\r\n line 3 \n"),
            (RESULT_WRONG_ANSWER, "line 3"))

    def test_empty_lines_ignored(self):
        self.assertEqual(
            extract_verdict_and_info(b"\n\nAccepted\n\n  \nok"),
            (RESULT_ACCEPTED, "ok"))

    def test_failure_one_line(self):
        with self.assertRaises(ValueError):
            extract_verdict_and_info(b"Accepted\n")

    def test_failure_three_lines(self):
        with self.assertRaises(ValueError):
            extract_verdict_and_info(b"Accepted\nok\nmore\n")

    def test_failure_unknown_result(self):
        with self.assertRaises(ValueError):
            extract_verdict_and_info(b"Correct\nok\n")
        with self.assertRaises(ValueError):
            extract_verdict_and_info(b"accepted\nok\n")

    def test_failure_invalid_utf8(self):
        with self.assertRaises(ValueError):
            extract_verdict_and_info(INVALID_UTF8 + b"\nok\n")


class TestVerifierStep(unittest.TestCase):

    def setUp(self):
        super().setUp()
        self.sandbox = FakeSandbox()

        patcher = patch("oj.grading.steps.trusted.logger.error",
                        wraps=trusted.logger.error)
        self.addCleanup(patcher.stop)
        self.mock_logger_error = patcher.start()

    def assertLoggedError(self, logged=True):
        if logged:
            self.mock_logger_error.assert_called()
        else:
            self.mock_logger_error.assert_not_called()

    def test_success(self):
        self.sandbox.fake_execute_data(Sandbox.EXIT_OK,
                                       stdout=b"Wrong Answer\nline 2\n")
        result, info = verifier_step(self.sandbox, COMMAND, "1.ans", "out")

        self.assertEqual(self.sandbox.commands,
                         [["checker", "--answer", "1.ans", "out"]])
        self.assertEqual(self.sandbox.deadline, 0)
        self.assertLoggedError(False)
        self.assertEqual((result, info), (RESULT_WRONG_ANSWER, "line 2"))

    def test_missing_command(self):
        for command in (None, []):
            result, info = verifier_step(self.sandbox, command, "a", "o")
            self.assertEqual(result, RESULT_SPJ_ERROR)
            self.assertEqual(info, VERIFIER_MESSAGES.get("missing").message)
        self.assertEqual(self.sandbox.commands, [])
        self.assertLoggedError()

    def test_nonzero_return(self):
        self.sandbox.fake_execute_data(Sandbox.EXIT_NONZERO_RETURN, 1,
                                       stdout=b"Accepted\nok\n")
        result, info = verifier_step(self.sandbox, COMMAND, "a", "o")

        self.assertLoggedError()
        self.assertEqual(result, RESULT_SPJ_ERROR)
        self.assertEqual(info, VERIFIER_MESSAGES.get("failed").message)

    def test_signal(self):
        self.sandbox.fake_execute_data(Sandbox.EXIT_SIGNAL, -11)
        result, info = verifier_step(self.sandbox, COMMAND, "a", "o")

        self.assertLoggedError()
        self.assertEqual(result, RESULT_SPJ_ERROR)

    def test_spawn_failure(self):
        self.sandbox.fake_execute_data(Sandbox.EXIT_OK, spawn_error=True)
        result, info = verifier_step(self.sandbox, COMMAND, "a", "o")

        self.assertLoggedError()
        self.assertEqual(result, RESULT_SPJ_ERROR)
        self.assertEqual(info, VERIFIER_MESSAGES.get("failed").message)

    def test_invalid_output(self):
        self.sandbox.fake_execute_data(Sandbox.EXIT_OK, stdout=b"Accepted\n")
        result, info = verifier_step(self.sandbox, COMMAND, "a", "o")

        self.assertLoggedError()
        self.assertEqual(result, RESULT_SPJ_ERROR)
        self.assertEqual(info, VERIFIER_MESSAGES.get("invalid").message)


if __name__ == "__main__":
    unittest.main()
