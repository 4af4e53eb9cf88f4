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

"""Mixins for tests reading and writing the throwaway database set up
by conftest.py.

The schema is dropped and recreated once per test class, and every test
gets its own session, rolled back afterwards. get_<object> builds a
detached object with unique names and sensible defaults; add_<object>
builds it and adds it to the test session. Keyword arguments override
any default.

"""

import itertools
import random
from datetime import timedelta

from ojcommon.constants import NO_CONTEST_ID
from ojcommon.datetime import make_datetime
from oj import JOB_STATE_FINISHED, RESULT_ACCEPTED
from oj.db import engine, metadata, Contest, Job, Session, User, drop_db, \
    init_db
from ojtestsuite.unit_tests.testconfig import CAT_SOURCE, ECHO_PROBLEM_ID, \
    SHELL_LANGUAGE


# Names must be unique across test runs sharing a database file.
_names = itertools.count(random.randint(0, 1_000_000_000))


def unique_name(prefix):
    return "%s%d" % (prefix, next(_names))


class DatabaseObjectGeneratorMixin:
    """Factories of detached database objects."""

    @classmethod
    def get_user(cls, **kwargs):
        """Create a user"""
        args = {
            "name": unique_name("user"),
        }
        args.update(kwargs)
        user = User(**args)
        return user

    @classmethod
    def get_contest(cls, **kwargs):
        """Create a contest, running from an hour ago to in an hour."""
        now = make_datetime()
        args = {
            "name": unique_name("contest"),
            "start": now - timedelta(hours=1),
            "stop": now + timedelta(hours=1),
            "problem_ids": [ECHO_PROBLEM_ID],
            "user_ids": [],
            "submission_limit": 10,
        }
        args.update(kwargs)
        contest = Contest(**args)
        return contest

    @classmethod
    def get_job(cls, user=None, **kwargs):
        """Create a finished, accepted job"""
        user = user if user is not None else cls.get_user()
        now = make_datetime()
        args = {
            "created_time": now,
            "updated_time": now,
            "source_code": CAT_SOURCE,
            "language": SHELL_LANGUAGE,
            "user": user,
            "contest_id": NO_CONTEST_ID,
            "problem_id": ECHO_PROBLEM_ID,
            "state": JOB_STATE_FINISHED,
            "result": RESULT_ACCEPTED,
            "score": 100.0,
            "cases": [],
        }
        args.update(kwargs)
        job = Job(**args)
        return job


class DatabaseMixin(DatabaseObjectGeneratorMixin):
    """Mixin for tests with database access."""

    @classmethod
    def setUpClass(cls):
        super().setUpClass()
        assert "fortesting" in str(engine.url), \
            "Tests are not using the testing database"
        drop_db()
        init_db()

    @classmethod
    def tearDownClass(cls):
        drop_db()
        super().tearDownClass()

    def setUp(self):
        super().setUp()
        self.session = Session()

    def tearDown(self):
        self.session.rollback()
        self.session.close()
        super().tearDown()

    def delete_data(self):
        """Delete all the data in the DB.

        This is useful to call during tear down, for tests that rely on
        starting from a clean DB.

        """
        for table in reversed(metadata.sorted_tables):
            self.session.execute(table.delete())
        self.session.commit()

    def add_user(self, **kwargs):
        """Create a user and add it to the session"""
        user = self.get_user(**kwargs)
        self.session.add(user)
        return user

    def add_contest(self, **kwargs):
        """Create a contest and add it to the session"""
        contest = self.get_contest(**kwargs)
        self.session.add(contest)
        return contest

    def add_job(self, **kwargs):
        """Create a job and add it to the session"""
        job = self.get_job(**kwargs)
        self.session.add(job)
        return job
