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

# Problem types, i.e., how the output of a case is judged.

# Line by line comparison, ignoring leading and trailing whitespaces.
PROBLEM_TYPE_STANDARD = "standard"
# Byte by byte comparison.
PROBLEM_TYPE_STRICT = "strict"
# Comparison delegated to an external verifier ("special judge").
PROBLEM_TYPE_SPJ = "spj"
# Like standard, but part of the score depends on the running time
# relative to the fastest accepted solution.
PROBLEM_TYPE_DYNAMIC_RANKING = "dynamic_ranking"

# Scoring rules, i.e., which job represents a user on a problem.

# The most recent job.
SCORING_RULE_LATEST = "latest"
# The job with the highest score.
SCORING_RULE_HIGHEST = "highest"

# Tie breakers among users with the same total score.

# Earlier last submission ranks higher.
TIE_BREAKER_SUBMISSION_TIME = "submission_time"
# Fewer submissions rank higher.
TIE_BREAKER_SUBMISSION_COUNT = "submission_count"
# Smaller user id ranks higher.
TIE_BREAKER_USER_ID = "user_id"

# Id of the built-in user and of the "no contest" scope.
ROOT_USER_ID = 0
ROOT_USER_NAME = "root"
NO_CONTEST_ID = 0
