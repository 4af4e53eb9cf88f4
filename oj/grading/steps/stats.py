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

"""Statistics about the last command executed in a sandbox."""

import re
import typing

from oj.grading.Sandbox import Sandbox


class StatsDict(typing.TypedDict):
    # In microseconds.
    execution_time: int
    exit_status: str
    exit_code: int
    signal: typing.NotRequired[int]
    stdout: typing.NotRequired[str]
    stderr: str


def _safe_decode(data: bytes) -> str:
    s = data.decode("utf-8", errors="replace")
    return re.sub('[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]', '�', s)


def execution_stats(sandbox: Sandbox, collect_output: bool = False) -> StatsDict:
    """Extract statistics from a sandbox about the last ran command.

    sandbox: the sandbox to inspect.
    collect_output: whether to also collect the captured standard
        output (only meaningful when it was not redirected to a file).

    return: a dictionary with statistics.

    """
    stats: StatsDict = {
        "execution_time": sandbox.get_execution_time(),
        "exit_status": sandbox.get_exit_status(),
        "exit_code": sandbox.get_exit_code(),
        "stderr": _safe_decode(sandbox.stderr),
    }
    if stats["exit_status"] == Sandbox.EXIT_SIGNAL:
        stats["signal"] = sandbox.get_killing_signal()
    if collect_output:
        stats["stdout"] = _safe_decode(sandbox.stdout)
    return stats
