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

"""High level function to perform the evaluation of a case."""

import logging

from oj import RESULT_RUNTIME_ERROR, RESULT_TIME_LIMIT_EXCEEDED
from oj.grading.Sandbox import Sandbox
from .messages import HumanMessage, MessageCollection
from .stats import StatsDict, execution_stats


logger = logging.getLogger(__name__)


# Name of the file where the output of a case is written, inside the
# sandbox.
OUTPUT_FILENAME = "output"


EVALUATION_MESSAGES = MessageCollection([
    # Running time reached the limit of the case, in microseconds.
    HumanMessage("timeout", "Time limit: %d"),
])


def evaluation_step(
    sandbox: Sandbox,
    command: list[str],
    time_limit: int = 0,
    stdin_redirect: str | None = None,
    stdout_redirect: str = OUTPUT_FILENAME,
) -> tuple[bool, str | None, str, StatsDict]:
    """Run the compiled program on a case.

    A non-zero exit (including death by a signal) is a runtime error,
    and takes precedence over the deadline; a program killed at the
    deadline exceeded the time limit and is reported as running for
    exactly the time limit.

    sandbox: the sandbox we consider, containing the program.
    command: the command running the program.
    time_limit: time limit in microseconds, 0 for no limit.
    stdin_redirect: the file to use as standard input.
    stdout_redirect: the file where to write the standard output.

    return: a tuple with four items:
        * evaluation success: True if the program terminated correctly
            and its output can be checked;
        * result: the result of the case if evaluation success is
            False, None otherwise;
        * info: a message for the case (the standard error or the time
            limit), empty if evaluation success is True;
        * stats: statistics about the execution.

    raise (ValueError): if the time limit is negative.
    raise (JobException): if the program cannot be spawned.

    """
    if time_limit < 0:
        raise ValueError("Time limit must be non-negative, is %s" % time_limit)

    logger.debug("Starting execution step.")
    sandbox.execute(command, stdin_file=stdin_redirect,
                    stdout_file=stdout_redirect, deadline=time_limit)
    stats = execution_stats(sandbox)

    exit_status = stats["exit_status"]
    if exit_status == Sandbox.EXIT_OK:
        logger.debug("Evaluation terminated correctly.")
        return True, None, "", stats

    logger.debug("Evaluation ended with exit status '%s'", exit_status)
    if exit_status in [Sandbox.EXIT_NONZERO_RETURN, Sandbox.EXIT_SIGNAL]:
        return False, RESULT_RUNTIME_ERROR, stats["stderr"], stats
    else:
        stats["execution_time"] = time_limit
        return (False, RESULT_TIME_LIMIT_EXCEEDED,
                EVALUATION_MESSAGES.get("timeout").format(time_limit), stats)
