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

from .compilation import EXECUTABLE_FILENAME, compilation_command, \
    compilation_step
from .evaluation import EVALUATION_MESSAGES, OUTPUT_FILENAME, evaluation_step
from .messages import HumanMessage, MessageCollection
from .outcome import classify
from .stats import StatsDict, execution_stats
from .trusted import VERIFIER_MESSAGES, extract_verdict_and_info, \
    verifier_command, verifier_step
from .whitediff import strict_diff, strict_diff_step, white_diff, \
    white_diff_step


__all__ = [
    # compilation.py
    "EXECUTABLE_FILENAME", "compilation_command", "compilation_step",
    # evaluation.py
    "EVALUATION_MESSAGES", "OUTPUT_FILENAME", "evaluation_step",
    # messages.py
    "HumanMessage", "MessageCollection",
    # outcome.py
    "classify",
    # stats.py
    "StatsDict", "execution_stats",
    # trusted.py
    "VERIFIER_MESSAGES", "extract_verdict_and_info", "verifier_command",
    "verifier_step",
    # whitediff.py
    "strict_diff", "strict_diff_step", "white_diff", "white_diff_step",
]
