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

"""High level function to perform the compilation of a submission."""

import logging

from oj import RESULT_COMPILATION_ERROR, RESULT_COMPILATION_SUCCESS
from oj.grading.Sandbox import Sandbox
from .stats import StatsDict, execution_stats


logger = logging.getLogger(__name__)


# Name of the compiled program inside the sandbox.
EXECUTABLE_FILENAME = "target"


def compilation_command(
    template: list[str], source_filename: str, executable_filename: str
) -> list[str]:
    """Substitute the %INPUT% and %OUTPUT% placeholders of a language
    command. Other tokens are kept as they are.

    """
    substitutions = {"%INPUT%": source_filename,
                     "%OUTPUT%": executable_filename}
    return [substitutions.get(token, token) for token in template]


def compilation_step(
    sandbox: Sandbox, command: list[str]
) -> tuple[bool, str, str, StatsDict]:
    """Execute the compilation command in the (already created) sandbox.

    The compiler has no deadline. Any way of terminating other than a
    zero exit code is a compilation error.

    sandbox: the sandbox we consider, containing the source.
    command: compilation command to execute.

    return: a tuple with four items:
        * compilation success: True if the compiler exited with 0;
        * result: the result to record for the compilation;
        * info: the compiler standard error on failure, empty otherwise;
        * stats: statistics about the execution of the compiler.

    raise (JobException): if the compiler cannot be spawned.

    """
    logger.debug("Starting compilation step in sandbox '%s'.",
                 sandbox.get_root_path())
    sandbox.execute(command)
    stats = execution_stats(sandbox)

    exit_status = stats["exit_status"]
    if exit_status == Sandbox.EXIT_OK:
        logger.debug("Compilation successfully finished.")
        return True, RESULT_COMPILATION_SUCCESS, "", stats

    logger.debug("Compilation failed (%s).",
                 sandbox.get_human_exit_description())
    return False, RESULT_COMPILATION_ERROR, stats["stderr"], stats
