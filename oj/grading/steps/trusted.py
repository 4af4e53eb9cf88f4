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

"""High level functions to run an external verifier (special judge).

A verifier is a trusted command configured with the problem. It is
given the reference answer and the output of the submission, and
writes on its standard output exactly two non-empty lines: the result
of the case (one of the result names, e.g. "Accepted" or "Wrong
Answer") and a free text to use as the info of the case. Empty lines
and surrounding whitespace are ignored.

"""

import logging

from oj import RESULTS, RESULT_SPJ_ERROR
from oj.grading import JobException
from oj.grading.Sandbox import Sandbox
from .messages import HumanMessage, MessageCollection


logger = logging.getLogger(__name__)


VERIFIER_MESSAGES = MessageCollection([
    # The verifier could not be run, or exited with a non-zero code.
    HumanMessage("failed",
                 "Error occurred while calling the special judger"),
    # Not exactly two lines, or the first one is not a known result.
    HumanMessage("invalid", "Invalid special judge output."),
    HumanMessage("missing", "Special judge command not found"),
])


def verifier_command(
    template: list[str], answer_filename: str, output_filename: str
) -> list[str]:
    """Substitute the %ANSWER% and %OUTPUT% placeholders of a verifier
    command. Other tokens are kept as they are.

    """
    substitutions = {"%ANSWER%": answer_filename,
                     "%OUTPUT%": output_filename}
    return [substitutions.get(token, token) for token in template]


def extract_verdict_and_info(stdout: bytes) -> tuple[str, str]:
    """Parse the output of a verifier.

    stdout: what the verifier wrote on its standard output.

    return: the result and the info of the case.

    raise (ValueError): if the output does not follow the protocol.

    """
    try:
        text = stdout.decode("utf-8")
    except UnicodeDecodeError as error:
        logger.error("Verifier stdout is not valid UTF-8. %r", error)
        raise ValueError("Cannot decode the verifier output.")

    lines = [line.strip() for line in text.splitlines()]
    lines = [line for line in lines if line != ""]
    if len(lines) != 2:
        raise ValueError("Expected 2 lines from the verifier, got %d."
                         % len(lines))

    verdict, info = lines
    if verdict not in RESULTS:
        # Avoid logging lots of text.
        raise ValueError("Unknown result `%s' from the verifier."
                         % verdict[:30])

    return verdict, info


def verifier_step(
    sandbox: Sandbox,
    command: list[str] | None,
    answer_filename: str,
    output_filename: str,
) -> tuple[str, str]:
    """Run the verifier on the output of a case.

    Every failure of the verifier only affects the case being checked,
    that gets the SPJ Error result with a description in the info.

    sandbox: the sandbox to run the verifier in.
    command: the verifier command with its placeholders, or None if
        the problem does not configure one.
    answer_filename: path of the reference answer.
    output_filename: path of the output of the submission.

    return: the result and the info of the case.

    """
    if command is None or len(command) == 0:
        logger.error("Configuration error: missing verifier command.")
        return RESULT_SPJ_ERROR, VERIFIER_MESSAGES.get("missing").message

    command = verifier_command(command, answer_filename, output_filename)
    try:
        sandbox.execute(command)
    except JobException as error:
        logger.error("Cannot run the verifier: %s", error)
        return RESULT_SPJ_ERROR, VERIFIER_MESSAGES.get("failed").message

    if sandbox.get_exit_status() != Sandbox.EXIT_OK:
        logger.error("Verifier ended with status '%s' (usually due to "
                     "programming errors in the verifier or configuration "
                     "issues).", sandbox.get_exit_status())
        return RESULT_SPJ_ERROR, VERIFIER_MESSAGES.get("failed").message

    try:
        return extract_verdict_and_info(sandbox.stdout)
    except ValueError as error:
        logger.error("Invalid output from verifier: %s", error)
        return RESULT_SPJ_ERROR, VERIFIER_MESSAGES.get("invalid").message
