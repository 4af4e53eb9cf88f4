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

"""Validation of new submissions."""

import logging
from datetime import datetime

from ojcommon.constants import NO_CONTEST_ID
from oj import config
from oj.db import Contest, Job, User
from oj.grading.Job import Submission
from . import ERR_INVALID_ARGUMENT, ERR_NOT_FOUND, ERR_RATE_LIMIT, \
    ValidationError


logger = logging.getLogger(__name__)


def check_submission(session, submission: Submission, timestamp: datetime):
    """Check that the submission can be accepted at the given time.

    The language and the problem must be configured; a submission to a
    contest must be for one of its problems, by one of its users,
    while the contest is running and without exceeding its
    submission limit; the user must exist.

    session (Session): the database session to use.
    submission: the submission to check.
    timestamp: the time of the submission.

    raise (ValidationError): if the submission is not acceptable.

    """
    if config.get_language(submission.language) is None:
        raise ValidationError(
            ERR_NOT_FOUND,
            "Language %s not supported." % submission.language)

    if config.get_problem(submission.problem_id) is None:
        raise ValidationError(
            ERR_NOT_FOUND,
            "Problem %d not found." % submission.problem_id)

    if submission.contest_id != NO_CONTEST_ID:
        contest = Contest.get_from_id(submission.contest_id, session)
        if contest is None:
            raise ValidationError(
                ERR_NOT_FOUND,
                "Contest %d not found." % submission.contest_id)
        if submission.problem_id not in contest.problem_ids:
            raise ValidationError(
                ERR_INVALID_ARGUMENT,
                "Contest %d does not contain problem %d."
                % (contest.id, submission.problem_id))
        if submission.user_id not in contest.user_ids:
            raise ValidationError(
                ERR_INVALID_ARGUMENT,
                "Contest %d does not contain user %d."
                % (contest.id, submission.user_id))
        if contest.phase(timestamp) != 0:
            raise ValidationError(
                ERR_INVALID_ARGUMENT,
                "Contest %d is not open now." % contest.id)

        count = session.query(Job) \
            .filter(Job.user_id == submission.user_id) \
            .filter(Job.contest_id == contest.id) \
            .filter(Job.problem_id == submission.problem_id) \
            .count()
        if count >= contest.submission_limit:
            raise ValidationError(ERR_RATE_LIMIT, "Submission limit reached.")

    if User.get_from_id(submission.user_id, session) is None:
        raise ValidationError(
            ERR_NOT_FOUND,
            "User %d not found." % submission.user_id)
