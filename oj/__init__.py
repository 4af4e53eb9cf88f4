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

# As this package initialization code is run by all code that imports
# something in oj.* it's the best place to setup the logging handlers.
# By importing the log module we install a handler on stdout. Other
# handlers will be added by long running processes by calling
# initialize_logging.
import oj.log


# Define what this package will provide.

__all__ = [
    "__version__",
    "JOB_STATE_QUEUEING", "JOB_STATE_RUNNING", "JOB_STATE_FINISHED",
    "JOB_STATE_CANCELED", "JOB_STATES",
    "RESULT_WAITING", "RESULT_RUNNING", "RESULT_ACCEPTED",
    "RESULT_COMPILATION_ERROR", "RESULT_COMPILATION_SUCCESS",
    "RESULT_WRONG_ANSWER", "RESULT_RUNTIME_ERROR",
    "RESULT_TIME_LIMIT_EXCEEDED", "RESULT_MEMORY_LIMIT_EXCEEDED",
    "RESULT_SYSTEM_ERROR", "RESULT_SPJ_ERROR", "RESULT_SKIPPED", "RESULTS",
    # conf
    "ConfigError", "config",
    # util
    "rmtree",
]


__version__ = "0.2.0"


# Job states.

JOB_STATE_QUEUEING = "Queueing"
JOB_STATE_RUNNING = "Running"
JOB_STATE_FINISHED = "Finished"
JOB_STATE_CANCELED = "Canceled"

JOB_STATES = [JOB_STATE_QUEUEING, JOB_STATE_RUNNING, JOB_STATE_FINISHED,
              JOB_STATE_CANCELED]


# Results, both of a whole job and of a single case. These strings are
# also what an external verifier writes on its first line.

RESULT_WAITING = "Waiting"
RESULT_RUNNING = "Running"
RESULT_ACCEPTED = "Accepted"
RESULT_COMPILATION_ERROR = "Compilation Error"
RESULT_COMPILATION_SUCCESS = "Compilation Success"
RESULT_WRONG_ANSWER = "Wrong Answer"
RESULT_RUNTIME_ERROR = "Runtime Error"
RESULT_TIME_LIMIT_EXCEEDED = "Time Limit Exceeded"
RESULT_MEMORY_LIMIT_EXCEEDED = "Memory Limit Exceeded"
RESULT_SYSTEM_ERROR = "System Error"
RESULT_SPJ_ERROR = "SPJ Error"
RESULT_SKIPPED = "Skipped"

RESULTS = [RESULT_WAITING, RESULT_RUNNING, RESULT_ACCEPTED,
           RESULT_COMPILATION_ERROR, RESULT_COMPILATION_SUCCESS,
           RESULT_WRONG_ANSWER, RESULT_RUNTIME_ERROR,
           RESULT_TIME_LIMIT_EXCEEDED, RESULT_MEMORY_LIMIT_EXCEEDED,
           RESULT_SYSTEM_ERROR, RESULT_SPJ_ERROR, RESULT_SKIPPED]


from .conf import ConfigError, config
from .util import rmtree
