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

"""Job-related database interface for SQLAlchemy.

"""

from datetime import datetime

from sqlalchemy.orm import relationship
from sqlalchemy.schema import Column, ForeignKey
from sqlalchemy.types import DateTime, Float, Integer, JSON, String, Unicode

from oj import JOB_STATES, RESULTS
from oj.grading.Job import CaseResult, Job as GradingJob, Submission
from . import Base, User


class Job(Base):
    """Class to store a submission together with its judgment.

    """
    __tablename__ = 'jobs'

    # Auto increment primary key.
    id: int = Column(
        Integer,
        primary_key=True)

    # Creation time, never changed, and time of the last judgment.
    created_time: datetime = Column(
        DateTime,
        nullable=False)
    updated_time: datetime = Column(
        DateTime,
        nullable=False)

    # The submission.
    source_code: str = Column(
        Unicode,
        nullable=False)
    language: str = Column(
        Unicode,
        nullable=False)
    user_id: int = Column(
        Integer,
        ForeignKey(User.id,
                   onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False,
        index=True)
    user: User = relationship(
        User,
        back_populates="jobs")
    # 0 when the submission is not part of a contest.
    contest_id: int = Column(
        Integer,
        nullable=False,
        index=True)
    problem_id: int = Column(
        Integer,
        nullable=False)

    # The judgment.
    state: str = Column(
        String,
        nullable=False)
    result: str = Column(
        String,
        nullable=False)
    score: float = Column(
        Float,
        nullable=False,
        default=0.0)
    # List of dicts as exported by CaseResult.
    cases: list[dict] = Column(
        JSON,
        nullable=False,
        default=list)

    def get_submission(self) -> Submission:
        return Submission(self.source_code, self.language, self.user_id,
                          self.contest_id, self.problem_id)

    def to_grading_job(self) -> GradingJob:
        """Return the in-memory representation of this job."""
        return GradingJob(
            self.id, self.created_time, self.updated_time,
            self.get_submission(), self.state, self.result, self.score,
            [CaseResult.import_from_dict(case) for case in self.cases])

    def set_judgment(self, job: GradingJob):
        """Store the judgment contained in job (state, result, score,
        cases and update time), leaving the rest untouched.

        """
        if job.state not in JOB_STATES or job.result not in RESULTS:
            raise ValueError("Invalid state or result: %s, %s"
                             % (job.state, job.result))
        self.updated_time = job.updated_time
        self.state = job.state
        self.result = job.result
        self.score = job.score
        self.cases = [case.export_to_dict() for case in job.cases]

    @classmethod
    def from_grading_job(cls, job: GradingJob) -> "Job":
        """Create a record for the given job. The id is the one of
        the job, or a new one if it is None.

        """
        submission = job.submission
        record = cls(
            id=job.id,
            created_time=job.created_time,
            source_code=submission.source_code,
            language=submission.language,
            user_id=submission.user_id,
            contest_id=submission.contest_id,
            problem_id=submission.problem_id)
        record.set_judgment(job)
        return record
