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

"""Dispatch of the output of a case to the comparison of its problem
type.

"""

import logging
import typing

from ojcommon.constants import PROBLEM_TYPE_DYNAMIC_RANKING, \
    PROBLEM_TYPE_SPJ, PROBLEM_TYPE_STANDARD, PROBLEM_TYPE_STRICT
from oj import RESULT_SPJ_ERROR
from .trusted import VERIFIER_MESSAGES
from .whitediff import strict_diff_step, white_diff_step


logger = logging.getLogger(__name__)


def classify(
    problem_type: str,
    answer: bytes,
    output: bytes,
    verifier: typing.Callable[[], tuple[str, str]] | None = None,
) -> tuple[str, str]:
    """Decide the result of a case whose program terminated correctly.

    problem_type: the type of the problem.
    answer: the reference answer.
    output: the output of the program.
    verifier: for verifier problems, a function running the verifier
        on this case and returning its result and info; None if the
        problem has no verifier command.

    return: the result and the info of the case.

    raise (ValueError): if the problem type is unknown.

    """
    if problem_type in (PROBLEM_TYPE_STANDARD, PROBLEM_TYPE_DYNAMIC_RANKING):
        return white_diff_step(output, answer)
    elif problem_type == PROBLEM_TYPE_STRICT:
        return strict_diff_step(output, answer)
    elif problem_type == PROBLEM_TYPE_SPJ:
        if verifier is None:
            return RESULT_SPJ_ERROR, VERIFIER_MESSAGES.get("missing").message
        return verifier()
    else:
        raise ValueError("Unknown problem type `%s'." % problem_type)
