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

"""Tests for the database models and helpers."""

import unittest
from datetime import datetime, timedelta

from ojcommon.constants import ROOT_USER_ID, ROOT_USER_NAME
from oj import JOB_STATE_FINISHED, JOB_STATE_QUEUEING, RESULT_ACCEPTED, \
    RESULT_COMPILATION_SUCCESS, RESULT_WAITING, RESULT_WRONG_ANSWER
import oj.db
from oj.db import Contest, Job, SessionGen, User, get_jobs, init_db
from oj.grading.Job import CaseResult, Job as GradingJob, Submission
from ojtestsuite.unit_tests.databasemixin import DatabaseMixin


START = datetime(2022, 3, 1, 12, 0, 0)


class TestInitDB(DatabaseMixin, unittest.TestCase):

    def test_root_user(self):
        root = User.get_from_id(ROOT_USER_ID, self.session)
        self.assertIsNotNone(root)
        self.assertEqual(root.name, ROOT_USER_NAME)

    def test_idempotent(self):
        self.assertTrue(init_db())
        self.assertEqual(self.session.query(User)
                         .filter(User.name == ROOT_USER_NAME).count(), 1)

    def test_new_users_after_root(self):
        user = self.add_user()
        self.session.commit()
        self.assertGreater(user.id, ROOT_USER_ID)
        self.assertEqual([u.id for u in User.get_all(self.session)],
                         [ROOT_USER_ID, user.id])
        self.assertEqual(user.export_to_dict(),
                         {"id": user.id, "name": user.name})

    def test_connection(self):
        oj.db.test_db_connection()


class TestContest(DatabaseMixin, unittest.TestCase):

    def test_phase(self):
        contest = self.get_contest(start=START,
                                   stop=START + timedelta(hours=2))
        self.assertEqual(contest.phase(START - timedelta(seconds=1)), -1)
        self.assertEqual(contest.phase(START), 0)
        self.assertEqual(contest.phase(START + timedelta(hours=1)), 0)
        self.assertEqual(contest.phase(START + timedelta(hours=2)), 1)

    def test_stored(self):
        contest = self.add_contest(start=START,
                                   stop=START + timedelta(hours=2),
                                   problem_ids=[2, 1], user_ids=[5],
                                   submission_limit=3)
        self.session.commit()
        self.session.expire_all()

        contest = Contest.get_from_id(contest.id, self.session)
        self.assertEqual(contest.export_to_dict(), {
            "id": contest.id,
            "name": contest.name,
            "from": "2022-03-01T12:00:00.000Z",
            "to": "2022-03-01T14:00:00.000Z",
            "problem_ids": [2, 1],
            "user_ids": [5],
            "submission_limit": 3,
        })


class TestJob(DatabaseMixin, unittest.TestCase):

    def test_from_and_to_grading_job(self):
        user = self.add_user()
        self.session.commit()
        submission = Submission("print(1)", "python", user.id, 0, 1)
        record = Job.from_grading_job(
            GradingJob(None, START, START, submission))
        self.session.add(record)
        self.session.commit()

        self.assertIsNotNone(record.id)
        self.assertEqual(record.state, JOB_STATE_QUEUEING)
        self.assertEqual(record.result, RESULT_WAITING)
        self.assertEqual(record.cases, [])
        self.assertIs(record.user, user)

        later = START + timedelta(minutes=1)
        record.set_judgment(GradingJob(
            record.id, START, later, submission, JOB_STATE_FINISHED,
            RESULT_ACCEPTED, 100.0,
            [CaseResult(0, RESULT_COMPILATION_SUCCESS, 30),
             CaseResult(1, RESULT_ACCEPTED, 20, info="fine")]))
        self.session.commit()
        self.session.expire_all()

        job = Job.get_from_id(record.id, self.session).to_grading_job()
        self.assertEqual(job.created_time, START)
        self.assertEqual(job.updated_time, later)
        self.assertEqual(job.state, JOB_STATE_FINISHED)
        self.assertEqual(job.score, 100.0)
        self.assertEqual(job.submission.source_code, "print(1)")
        self.assertEqual(job.submission.user_id, user.id)
        self.assertEqual([(c.id, c.result, c.time, c.info) for c in job.cases],
                         [(0, RESULT_COMPILATION_SUCCESS, 30, ""),
                          (1, RESULT_ACCEPTED, 20, "fine")])

    def test_set_judgment_rejects_unknown_values(self):
        submission = Submission("", "python", 0, 0, 1)
        record = Job.from_grading_job(
            GradingJob(None, START, START, submission))
        with self.assertRaises(ValueError):
            record.set_judgment(GradingJob(
                None, START, START, submission, "Exploded", RESULT_ACCEPTED))


class TestGetJobs(DatabaseMixin, unittest.TestCase):

    def setUp(self):
        super().setUp()
        self.alice = self.add_user(name="alice")
        self.bob = self.add_user(name="bob")
        self.jobs = [
            self.add_job(user=self.alice, contest_id=0, problem_id=1,
                         created_time=START),
            self.add_job(user=self.alice, contest_id=2, problem_id=2,
                         created_time=START + timedelta(minutes=1),
                         language="c"),
            self.add_job(user=self.bob, contest_id=3, problem_id=1,
                         created_time=START + timedelta(minutes=2),
                         result=RESULT_WRONG_ANSWER),
            self.add_job(user=self.bob, contest_id=2, problem_id=1,
                         created_time=START + timedelta(minutes=3),
                         state=JOB_STATE_QUEUEING),
        ]
        self.session.commit()

    def tearDown(self):
        self.delete_data()
        init_db()
        super().tearDown()

    def assertJobs(self, found, indices):
        self.assertEqual([job.id for job in found],
                         [self.jobs[i].id for i in indices])

    def test_no_filter(self):
        self.assertJobs(get_jobs(self.session), [0, 1, 2, 3])

    def test_user(self):
        self.assertJobs(get_jobs(self.session, user_id=self.bob.id), [2, 3])
        self.assertJobs(get_jobs(self.session, user_name="alice"), [0, 1])
        self.assertJobs(get_jobs(self.session, user_name="carol"), [])

    def test_contest_includes_practice(self):
        self.assertJobs(get_jobs(self.session, contest_id=2), [0, 1, 3])
        self.assertJobs(get_jobs(self.session, contest_id=0), [0])

    def test_problem_and_language(self):
        self.assertJobs(get_jobs(self.session, problem_id=1), [0, 2, 3])
        self.assertJobs(get_jobs(self.session, language="c"), [1])

    def test_time_window(self):
        self.assertJobs(
            get_jobs(self.session, from_=START + timedelta(minutes=1),
                     to=START + timedelta(minutes=2)),
            [1, 2])

    def test_state_and_result(self):
        self.assertJobs(get_jobs(self.session, state=JOB_STATE_QUEUEING), [3])
        self.assertJobs(get_jobs(self.session, result=RESULT_WRONG_ANSWER),
                        [2])

    def test_combined(self):
        self.assertJobs(
            get_jobs(self.session, user_id=self.alice.id, contest_id=2,
                     problem_id=2),
            [1])


class TestSessionGen(DatabaseMixin, unittest.TestCase):

    def test_rollback_without_commit(self):
        with SessionGen() as session:
            session.add(self.get_user(name="ghost"))
            session.flush()
        self.assertIsNone(self.session.query(User)
                          .filter(User.name == "ghost").first())


if __name__ == "__main__":
    unittest.main()
