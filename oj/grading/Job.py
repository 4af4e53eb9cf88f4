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

"""The in-memory representation of a submission and of its judgment.

These objects are what the judge produces and what the ranking engine
consumes; they can be converted to and from plain dicts (with the wire
names of the fields) and to and from the database records.

"""

import logging
from datetime import datetime

from ojcommon.datetime import format_datetime, parse_datetime
from oj import JOB_STATE_QUEUEING, RESULT_WAITING


logger = logging.getLogger(__name__)


class Submission:
    """What a user submitted: a source for a problem, in a language,
    possibly inside a contest (0 means no contest).

    """

    def __init__(
        self,
        source_code: str,
        language: str,
        user_id: int,
        contest_id: int,
        problem_id: int,
    ):
        self.source_code = source_code
        self.language = language
        self.user_id = user_id
        self.contest_id = contest_id
        self.problem_id = problem_id

    def export_to_dict(self) -> dict:
        return {
            "source_code": self.source_code,
            "language": self.language,
            "user_id": self.user_id,
            "contest_id": self.contest_id,
            "problem_id": self.problem_id,
        }

    @classmethod
    def import_from_dict(cls, data: dict) -> "Submission":
        return cls(data["source_code"], data["language"], data["user_id"],
                   data["contest_id"], data["problem_id"])


class CaseResult:
    """The outcome of one case. Case 0 is the compilation."""

    def __init__(
        self,
        id: int,
        result: str = RESULT_WAITING,
        time: int = 0,
        memory: int = 0,
        info: str = "",
    ):
        """Initialization.

        id: index of the case, 0 for the compilation.
        result: result of the case.
        time: running time in microseconds.
        memory: memory used, not measured.
        info: standard error, verifier message or diagnostic.

        """
        self.id = id
        self.result = result
        self.time = time
        self.memory = memory
        self.info = info

    def __repr__(self):
        return "CaseResult(%d, %r, %d)" % (self.id, self.result, self.time)

    def export_to_dict(self) -> dict:
        return {
            "id": self.id,
            "result": self.result,
            "time": self.time,
            "memory": self.memory,
            "info": self.info,
        }

    @classmethod
    def import_from_dict(cls, data: dict) -> "CaseResult":
        return cls(**data)


class Job:
    """The judgment of a submission."""

    def __init__(
        self,
        id: int,
        created_time: datetime,
        updated_time: datetime,
        submission: Submission,
        state: str = JOB_STATE_QUEUEING,
        result: str = RESULT_WAITING,
        score: float = 0.0,
        cases: list[CaseResult] | None = None,
    ):
        if cases is None:
            cases = []

        self.id = id
        self.created_time = created_time
        self.updated_time = updated_time
        self.submission = submission
        self.state = state
        self.result = result
        self.score = score
        self.cases = cases

    def __repr__(self):
        return "Job(%d, %r, %r, %s)" % (self.id, self.state, self.result,
                                        self.score)

    def export_to_dict(self) -> dict:
        """Return a dict representing the job, with datetimes as
        strings.

        """
        return {
            "id": self.id,
            "created_time": format_datetime(self.created_time),
            "updated_time": format_datetime(self.updated_time),
            "submission": self.submission.export_to_dict(),
            "state": self.state,
            "result": self.result,
            "score": self.score,
            "cases": [case.export_to_dict() for case in self.cases],
        }

    @classmethod
    def import_from_dict(cls, data: dict) -> "Job":
        """Create a Job from the output of export_to_dict."""
        return cls(
            data["id"],
            parse_datetime(data["created_time"]),
            parse_datetime(data["updated_time"]),
            Submission.import_from_dict(data["submission"]),
            data["state"],
            data["result"],
            data["score"],
            [CaseResult.import_from_dict(case) for case in data["cases"]])
