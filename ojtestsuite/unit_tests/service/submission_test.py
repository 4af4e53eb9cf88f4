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

"""Tests for the validation of submissions."""

import unittest
from datetime import timedelta

from ojcommon.datetime import make_datetime
from oj.grading.Job import Submission
from oj.service import ERR_INVALID_ARGUMENT, ERR_NOT_FOUND, \
    ERR_RATE_LIMIT, ValidationError
from oj.service.submission import check_submission
from ojtestsuite.unit_tests.databasemixin import DatabaseMixin
from ojtestsuite.unit_tests.testconfig import CAT_SOURCE, \
    DYNAMIC_PROBLEM_ID, ECHO_PROBLEM_ID, SHELL_LANGUAGE


class TestCheckSubmission(DatabaseMixin, unittest.TestCase):

    def setUp(self):
        super().setUp()
        self.now = make_datetime()
        self.user = self.add_user()
        self.contest = self.add_contest(problem_ids=[ECHO_PROBLEM_ID],
                                        submission_limit=2)
        self.session.flush()
        self.contest.user_ids = [self.user.id]
        self.session.commit()

    def submission(self, **kwargs):
        args = {
            "source_code": CAT_SOURCE,
            "language": SHELL_LANGUAGE,
            "user_id": self.user.id,
            "contest_id": self.contest.id,
            "problem_id": ECHO_PROBLEM_ID,
        }
        args.update(kwargs)
        return Submission(**args)

    def assertRefused(self, submission, reason, timestamp=None):
        if timestamp is None:
            timestamp = self.now
        with self.assertRaises(ValidationError) as cm:
            check_submission(self.session, submission, timestamp)
        self.assertEqual(cm.exception.reason, reason)
        return cm.exception

    def test_success(self):
        check_submission(self.session, self.submission(), self.now)

    def test_success_practice(self):
        check_submission(
            self.session,
            self.submission(contest_id=0, problem_id=DYNAMIC_PROBLEM_ID),
            self.now)

    def test_unknown_language(self):
        error = self.assertRefused(self.submission(language="cobol"),
                                   ERR_NOT_FOUND)
        self.assertEqual(error.export_to_dict(), {
            "reason": ERR_NOT_FOUND,
            "message": "Language cobol not supported.",
        })

    def test_unknown_problem(self):
        self.assertRefused(self.submission(problem_id=999), ERR_NOT_FOUND)

    def test_unknown_contest(self):
        self.assertRefused(self.submission(contest_id=self.contest.id + 1),
                           ERR_NOT_FOUND)

    def test_problem_not_in_contest(self):
        self.assertRefused(self.submission(problem_id=DYNAMIC_PROBLEM_ID),
                           ERR_INVALID_ARGUMENT)

    def test_user_not_in_contest(self):
        other = self.add_user()
        self.session.commit()
        self.assertRefused(self.submission(user_id=other.id),
                           ERR_INVALID_ARGUMENT)

    def test_contest_not_running(self):
        self.assertRefused(self.submission(), ERR_INVALID_ARGUMENT,
                           self.contest.start - timedelta(seconds=1))
        self.assertRefused(self.submission(), ERR_INVALID_ARGUMENT,
                           self.contest.stop)

    def test_submission_limit(self):
        self.add_job(user=self.user, contest_id=self.contest.id)
        self.session.commit()
        check_submission(self.session, self.submission(), self.now)

        self.add_job(user=self.user, contest_id=self.contest.id)
        self.session.commit()
        self.assertRefused(self.submission(), ERR_RATE_LIMIT)

    def test_submission_limit_ignores_practice(self):
        self.add_job(user=self.user, contest_id=0)
        self.add_job(user=self.user, contest_id=0)
        self.session.commit()
        check_submission(self.session, self.submission(), self.now)

    def test_unknown_user(self):
        self.assertRefused(self.submission(user_id=123456, contest_id=0),
                           ERR_NOT_FOUND)


if __name__ == "__main__":
    unittest.main()
