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

"""Workspace and process supervision for the programs we judge.

A Sandbox owns a private directory and runs commands inside it, one at
a time, enforcing only a wall clock deadline. There is no isolation
from the rest of the system: compilers, submissions and verifiers run
with the same privileges as the judge.

"""

import logging
import os
import signal
import stat
import tempfile
import time
import typing

import gevent
from gevent import subprocess

from oj import config, rmtree
from oj.grading import JobException


logger = logging.getLogger(__name__)


class Sandbox:
    """A private directory plus the ability of running commands in it
    under a wall clock deadline.

    After each execution the status of the last command can be queried
    with the get_* methods; the deadline supervision is a blocking wait
    on the child, so each running command costs one greenlet and no
    CPU.

    """

    EXIT_OK = "ok"
    EXIT_NONZERO_RETURN = "nonzero return"
    EXIT_SIGNAL = "signal"
    EXIT_TIMEOUT = "timeout"

    def __init__(self, name: str | None = None, temp_dir: str | None = None):
        """Initialization.

        name: a short string that will be used in the name of the
            directory, to make it easier to find (e.g. "job3").
        temp_dir: the directory where to create the sandbox; if None,
            the one in the configuration is used.

        raise (JobException): if the directory cannot be created.

        """
        self.name = name if name is not None else "unnamed"
        self.temp_dir = temp_dir if temp_dir is not None \
            else config.global_.temp_dir

        # mkdtemp adds a random suffix, so two sandboxes with the same
        # name never share the directory.
        try:
            self._path = tempfile.mkdtemp(
                dir=self.temp_dir, prefix="oj-%s-" % self.name)
        except OSError as error:
            logger.error("Cannot create sandbox directory in %s: %s.",
                         self.temp_dir, error)
            raise JobException("Cannot create sandbox: %s" % error)

        logger.debug("Sandbox in `%s' created.", self._path)

        self.exec_num = -1
        self.popen: subprocess.Popen | None = None
        # Whether the process group of the last command may still have
        # members; its id can be reused once they are all gone.
        self._group_alive = False
        self.popen_time: float | None = None
        self.exec_time: float | None = None
        self.timed_out = False

        # Parameters of the last execution.
        self.stdin_file: str | None = None
        self.stdout_file: str | None = None
        self.deadline = 0

        # What the last command wrote on the pipes.
        self.stdout = b""
        self.stderr = b""

    def get_root_path(self) -> str:
        """Return the toplevel path of the sandbox."""
        return self._path

    def relative_path(self, path: str) -> str:
        """Translate from a relative path inside the sandbox to a
        system path. Absolute paths are returned unchanged.

        """
        return os.path.join(self._path, path)

    def create_file_from_string(
        self, path: str, content: bytes, executable: bool = False
    ):
        """Write some data to a new file in the sandbox.

        path: relative path of the file inside the sandbox.
        content: what to write in the file.
        executable: to set permissions.

        raise (JobException): if the file cannot be written.

        """
        logger.debug("Creating file %s in sandbox.", path)
        real_path = self.relative_path(path)
        try:
            with open(real_path, "xb") as dest_fobj:
                dest_fobj.write(content)
            mod = stat.S_IRUSR | stat.S_IRGRP | stat.S_IROTH | stat.S_IWUSR
            if executable:
                mod |= stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH
            os.chmod(real_path, mod)
        except OSError as error:
            logger.error("Failed to create file %s in sandbox: %s.",
                         real_path, error)
            raise JobException("Cannot write %s: %s" % (path, error))

    def file_exists(self, path: str) -> bool:
        return os.path.exists(self.relative_path(path))

    def get_file_to_string(self, path: str, maxlen: int | None = None) -> bytes:
        """Return the content of a file given its path relative to the
        sandbox.

        path: relative path of the file inside the sandbox.
        maxlen: maximum number of bytes to read, or None if no limit.

        return: the content of the file up to maxlen bytes.

        raise (JobException): if the file cannot be read.

        """
        logger.debug("Retrieving file %s from sandbox.", path)
        try:
            with open(self.relative_path(path), "rb") as file_:
                return file_.read() if maxlen is None else file_.read(maxlen)
        except OSError as error:
            raise JobException("Cannot read %s: %s" % (path, error))

    def execute(
        self,
        command: list[str],
        stdin_file: str | None = None,
        stdout_file: str | None = None,
        deadline: int = 0,
    ):
        """Run a command in the sandbox and wait for it to terminate or
        for the deadline to pass, whichever comes first.

        Standard error is always captured (in self.stderr), standard
        output is captured in self.stdout unless redirected to a file.

        command: executable filename and arguments of the command.
        stdin_file: file to use as standard input, relative to the
            sandbox or absolute; if None, the command gets an empty
            input.
        stdout_file: file where to write the standard output, relative
            to the sandbox or absolute.
        deadline: wall clock limit in microseconds, 0 for no limit.

        raise (JobException): if the command cannot be spawned.

        """
        self.exec_num += 1
        self.stdin_file = stdin_file
        self.stdout_file = stdout_file
        self.deadline = deadline
        self.timed_out = False
        self.exec_time = None
        self.stdout = b""
        self.stderr = b""

        logger.debug("Executing program in sandbox with command: `%s'.",
                     " ".join(command))

        stdin_fd = subprocess.DEVNULL
        stdout_fd = subprocess.PIPE
        try:
            if stdin_file is not None:
                stdin_fd = os.open(self.relative_path(stdin_file),
                                   os.O_RDONLY)
            if stdout_file is not None:
                stdout_fd = os.open(self.relative_path(stdout_file),
                                    os.O_WRONLY | os.O_TRUNC | os.O_CREAT,
                                    stat.S_IRUSR | stat.S_IRGRP |
                                    stat.S_IROTH | stat.S_IWUSR)
            self.popen_time = time.monotonic()
            # A new session lets kill() reach the whole process group,
            # so children left behind by the command do not keep our
            # pipes open.
            self.popen = subprocess.Popen(
                command, stdin=stdin_fd, stdout=stdout_fd,
                stderr=subprocess.PIPE, cwd=self._path, close_fds=True,
                start_new_session=True)
            self._group_alive = True
        except OSError as error:
            logger.error("Failed to execute program in sandbox "
                         "with command: `%s': %s.", " ".join(command), error)
            raise JobException("Cannot execute %s: %s" % (command[0], error))
        finally:
            # Close file descriptors passed to the child.
            for fd in (stdin_fd, stdout_fd):
                if fd >= 0:
                    os.close(fd)

        timeout = deadline / 1_000_000 if deadline > 0 else None
        reader = gevent.spawn(self.popen.communicate)
        try:
            try:
                self.popen.wait(timeout=timeout)
            except subprocess.TimeoutExpired:
                logger.debug("Command exceeded the deadline of %d us, "
                             "killing.", deadline)
                self.timed_out = True
            self.exec_time = time.monotonic() - self.popen_time
            # Children left behind by the command keep the pipes open
            # and must not outlive it.
            self.kill()
            self._group_alive = False
            stdout, stderr = reader.get()
        except gevent.GreenletExit:
            # The judgment was canceled, take the command down with us.
            self.kill()
            self._group_alive = False
            reader.kill()
            raise

        self.stdout = stdout if stdout is not None else b""
        self.stderr = stderr if stderr is not None else b""

    def kill(self):
        """Kill the running command, if any, with all the processes of
        its group, also when the command itself has already exited.

        """
        if self.popen is None or not self._group_alive:
            return
        try:
            os.killpg(self.popen.pid, signal.SIGKILL)
        except ProcessLookupError:
            # The whole group had died by itself.
            pass

    def get_execution_time(self) -> int:
        """Return the wall clock time of the last command in
        microseconds. A command killed by the deadline is reported as
        taking exactly the deadline.

        """
        if self.timed_out:
            return self.deadline
        if self.exec_time is None:
            return 0
        return int(self.exec_time * 1_000_000)

    def get_exit_status(self) -> str:
        """Get information about how the last command terminated.

        return: one of the EXIT_* constants.

        """
        if self.timed_out:
            return self.EXIT_TIMEOUT
        if self.popen.returncode == 0:
            return self.EXIT_OK
        elif self.popen.returncode > 0:
            return self.EXIT_NONZERO_RETURN
        else:
            return self.EXIT_SIGNAL

    def get_exit_code(self) -> int:
        """Return the exit code of the last command, negative if it was
        killed by a signal.

        """
        return self.popen.returncode

    def get_killing_signal(self) -> int:
        """Return the signal that killed the last command, or 0."""
        if self.popen.returncode < 0:
            return -self.popen.returncode
        return 0

    def get_human_exit_description(self) -> str:
        status = self.get_exit_status()
        if status == self.EXIT_OK:
            return "Execution successfully finished"
        elif status == self.EXIT_NONZERO_RETURN:
            return "Execution failed with exit code %d" % self.get_exit_code()
        elif status == self.EXIT_SIGNAL:
            return "Execution killed with signal %d" % \
                self.get_killing_signal()
        else:
            return "Execution timed out after %d us" % self.deadline

    def cleanup(self, delete: bool = False):
        """Kill what is still running and, if asked, delete the
        directory. Errors while deleting are logged and ignored.

        delete: whether to delete the sandbox directory.

        """
        self.kill()
        if delete:
            logger.debug("Deleting sandbox in %s.", self._path)
            try:
                rmtree(self._path)
            except OSError:
                logger.warning("Failed to delete sandbox %s.", self._path,
                               exc_info=True)


SandboxFactory = typing.Callable[..., Sandbox]
