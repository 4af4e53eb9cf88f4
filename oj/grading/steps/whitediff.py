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

"""Comparison of the output of a program with the reference answer."""

import logging

from oj import RESULT_ACCEPTED, RESULT_WRONG_ANSWER


logger = logging.getLogger(__name__)


# We take as definition of whitespaces the list of Unicode White_Space
# characters (see http://www.unicode.org/Public/6.3.0/ucd/PropList.txt) that
# are in the ASCII range.
_WHITES = b" \t\n\x0b\x0c\r"


def _white_diff_lines(content):
    """Split the content in lines and strip each of them.

    A final line break terminates the last line and does not start a
    new one, so "a\nb\n" has two lines, like "a\nb".

    content (bytes): the content to split.
    return ([bytes]): the stripped lines.

    """
    return [line.strip(_WHITES) for line in content.splitlines()]


def white_diff(output, answer):
    """Compare the two outputs line by line. They are equal if they
    have the same number of lines and, for every i, line i of the
    first is equal to line i of the second once leading and trailing
    whitespaces are removed.

    output (bytes): the output of the program.
    answer (bytes): the reference answer.
    return (bool): True if the two outputs are equal as explained above.

    """
    return _white_diff_lines(output) == _white_diff_lines(answer)


def strict_diff(output, answer):
    """Compare the two outputs byte by byte."""
    return output == answer


def white_diff_step(output, answer):
    """Return the verdict of a case compared with white_diff.

    return ((str, str)): the result and the info of the case.

    """
    if white_diff(output, answer):
        return RESULT_ACCEPTED, ""
    return RESULT_WRONG_ANSWER, ""


def strict_diff_step(output, answer):
    """Return the verdict of a case compared with strict_diff.

    return ((str, str)): the result and the info of the case.

    """
    if strict_diff(output, answer):
        return RESULT_ACCEPTED, ""
    return RESULT_WRONG_ANSWER, ""
