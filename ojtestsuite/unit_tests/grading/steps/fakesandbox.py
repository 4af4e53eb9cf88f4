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

"""A fake sandbox for tests."""

from collections import deque

from oj.grading import JobException
from oj.grading.Sandbox import Sandbox


class FakeSandbox(Sandbox):
    """A sandbox that does not run anything.

    Each call to execute consumes the data given to fake_execute_data,
    in order; files can be faked with fake_file to answer
    get_file_to_string and file_exists.

    """
    def __init__(self, name=None, temp_dir=None):
        super().__init__(name, temp_dir)
        self._fake_files = {}
        self._fake_execute_data = deque()
        self._last = None
        self.commands = []

    def fake_file(self, path, content):
        assert isinstance(content, bytes)
        self._fake_files[path] = content

    def fake_execute_data(self, exit_status, exit_code=0, time=1000,
                          stdout=b"", stderr=b"", spawn_error=False):
        """Set the fake data for the corresponding execution.

        Can be called multiple times, and this allows the system under test
        to call execute multiple times.

        exit_status (str): one of the Sandbox.EXIT_* constants.
        exit_code (int): the exit code, negative for a signal.
        time (int): wall clock time in microseconds, ignored for
            EXIT_TIMEOUT.
        stdout (bytes): captured standard output.
        stderr (bytes): captured standard error.
        spawn_error (bool): if True execute raises JobException.

        """
        self._fake_execute_data.append({
            "exit_status": exit_status,
            "exit_code": exit_code,
            "time": time,
            "stdout": stdout,
            "stderr": stderr,
            "spawn_error": spawn_error,
        })

    def execute(self, command, stdin_file=None, stdout_file=None,
                deadline=0):
        assert len(self._fake_execute_data) > 0

        self.exec_num += 1
        self.commands.append(command)
        self.stdin_file = stdin_file
        self.stdout_file = stdout_file
        self.deadline = deadline

        data = self._fake_execute_data.popleft()
        if data["spawn_error"]:
            raise JobException("Cannot execute %s" % command[0])
        self._last = data
        self.timed_out = data["exit_status"] == Sandbox.EXIT_TIMEOUT
        self.stdout = data["stdout"]
        self.stderr = data["stderr"]

    def get_execution_time(self):
        if self.timed_out:
            return self.deadline
        return self._last["time"]

    def get_exit_status(self):
        return self._last["exit_status"]

    def get_exit_code(self):
        return self._last["exit_code"]

    def get_killing_signal(self):
        if self._last["exit_code"] < 0:
            return -self._last["exit_code"]
        return 0

    def file_exists(self, path):
        return path in self._fake_files

    def get_file_to_string(self, path, maxlen=None):
        assert maxlen is None  # other case not handled by fake
        if path in self._fake_files:
            return self._fake_files[path]
        raise JobException("Cannot read %s" % path)

    def cleanup(self, delete=False):
        pass
