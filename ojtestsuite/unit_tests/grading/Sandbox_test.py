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

"""Tests for the sandbox, running real commands."""

import os
import time
import unittest

import gevent

from oj.grading import JobException
from oj.grading.Sandbox import Sandbox


def sh(script):
    return ["/bin/sh", "-c", script]


class TestSandbox(unittest.TestCase):

    def setUp(self):
        super().setUp()
        self.sandbox = Sandbox(name="test")
        self.addCleanup(self.sandbox.cleanup, delete=True)

    def test_directory(self):
        path = self.sandbox.get_root_path()
        self.assertTrue(os.path.isdir(path))
        self.assertTrue(os.path.basename(path).startswith("oj-test-"))
        self.assertEqual(self.sandbox.relative_path("a"),
                         os.path.join(path, "a"))
        self.assertEqual(self.sandbox.relative_path("/abs/a"), "/abs/a")

    def test_two_sandboxes_with_the_same_name(self):
        other = Sandbox(name="test")
        self.addCleanup(other.cleanup, delete=True)
        self.assertNotEqual(other.get_root_path(),
                            self.sandbox.get_root_path())

    def test_files(self):
        self.sandbox.create_file_from_string("a.txt", b"content")
        self.assertTrue(self.sandbox.file_exists("a.txt"))
        self.assertFalse(self.sandbox.file_exists("b.txt"))
        self.assertEqual(self.sandbox.get_file_to_string("a.txt"),
                         b"content")
        self.assertEqual(self.sandbox.get_file_to_string("a.txt", 3), b"con")

    def test_files_errors(self):
        self.sandbox.create_file_from_string("a.txt", b"content")
        with self.assertRaises(JobException):
            self.sandbox.create_file_from_string("a.txt", b"again")
        with self.assertRaises(JobException):
            self.sandbox.get_file_to_string("missing.txt")

    def test_executable(self):
        self.sandbox.create_file_from_string(
            "run.sh", b"#!/bin/sh\necho hi\n", executable=True)
        self.sandbox.execute([self.sandbox.relative_path("run.sh")])
        self.assertEqual(self.sandbox.get_exit_status(), Sandbox.EXIT_OK)
        self.assertEqual(self.sandbox.stdout, b"hi\n")

    def test_ok(self):
        self.sandbox.execute(sh("echo out; echo err >&2"))
        self.assertEqual(self.sandbox.get_exit_status(), Sandbox.EXIT_OK)
        self.assertEqual(self.sandbox.get_exit_code(), 0)
        self.assertEqual(self.sandbox.stdout, b"out\n")
        self.assertEqual(self.sandbox.stderr, b"err\n")
        self.assertGreater(self.sandbox.get_execution_time(), 0)

    def test_working_directory(self):
        self.sandbox.execute(sh("pwd"))
        self.assertEqual(
            os.path.realpath(self.sandbox.stdout.decode().strip()),
            os.path.realpath(self.sandbox.get_root_path()))

    def test_redirections(self):
        self.sandbox.create_file_from_string("in", b"1\n2\n")
        self.sandbox.execute(["cat"], stdin_file="in", stdout_file="out")
        self.assertEqual(self.sandbox.get_exit_status(), Sandbox.EXIT_OK)
        self.assertEqual(self.sandbox.stdout, b"")
        self.assertEqual(self.sandbox.get_file_to_string("out"), b"1\n2\n")

    def test_no_input(self):
        self.sandbox.execute(["cat"])
        self.assertEqual(self.sandbox.get_exit_status(), Sandbox.EXIT_OK)
        self.assertEqual(self.sandbox.stdout, b"")

    def test_nonzero_return(self):
        self.sandbox.execute(sh("exit 3"))
        self.assertEqual(self.sandbox.get_exit_status(),
                         Sandbox.EXIT_NONZERO_RETURN)
        self.assertEqual(self.sandbox.get_exit_code(), 3)
        self.assertEqual(self.sandbox.get_human_exit_description(),
                         "Execution failed with exit code 3")

    def test_signal(self):
        self.sandbox.execute(sh("kill -9 $$"))
        self.assertEqual(self.sandbox.get_exit_status(), Sandbox.EXIT_SIGNAL)
        self.assertEqual(self.sandbox.get_killing_signal(), 9)

    def test_timeout(self):
        self.sandbox.execute(sh("sleep 10"), deadline=200_000)
        self.assertEqual(self.sandbox.get_exit_status(), Sandbox.EXIT_TIMEOUT)
        self.assertEqual(self.sandbox.get_execution_time(), 200_000)

    def test_timeout_kills_children(self):
        # The shell forks, and the child keeps stdout open.
        self.sandbox.execute(sh("sleep 10; echo late"), deadline=200_000)
        self.assertEqual(self.sandbox.get_exit_status(), Sandbox.EXIT_TIMEOUT)
        self.assertEqual(self.sandbox.stdout, b"")

    def test_exited_command_leaves_children_behind(self):
        # The shell exits at once, the background child holds stderr.
        start = time.monotonic()
        self.sandbox.execute(sh("sleep 10 & exit 3"), deadline=200_000)
        self.assertLess(time.monotonic() - start, 5)
        self.assertEqual(self.sandbox.get_exit_status(),
                         Sandbox.EXIT_NONZERO_RETURN)
        self.assertEqual(self.sandbox.get_exit_code(), 3)

    def test_exited_command_leaves_children_behind_no_deadline(self):
        start = time.monotonic()
        self.sandbox.execute(sh("echo out; sleep 10 & exit 0"))
        self.assertLess(time.monotonic() - start, 5)
        self.assertEqual(self.sandbox.get_exit_status(), Sandbox.EXIT_OK)
        self.assertEqual(self.sandbox.stdout, b"out\n")

    def test_within_deadline(self):
        self.sandbox.execute(sh("true"), deadline=5_000_000)
        self.assertEqual(self.sandbox.get_exit_status(), Sandbox.EXIT_OK)
        self.assertLess(self.sandbox.get_execution_time(), 5_000_000)

    def test_spawn_failure(self):
        with self.assertRaises(JobException):
            self.sandbox.execute(["/nonexistent/program"])

    def test_kill_from_another_greenlet(self):
        greenlet = gevent.spawn(self.sandbox.execute, sh("sleep 10"))
        gevent.sleep(0.2)
        greenlet.kill(block=True, timeout=5)
        self.assertTrue(greenlet.dead)
        self.assertEqual(self.sandbox.popen.wait(timeout=5), -9)

    def test_cleanup(self):
        path = self.sandbox.get_root_path()
        self.sandbox.create_file_from_string("a.txt", b"content")
        self.sandbox.cleanup(delete=False)
        self.assertTrue(os.path.isdir(path))
        self.sandbox.cleanup(delete=True)
        self.assertFalse(os.path.exists(path))


if __name__ == "__main__":
    unittest.main()
