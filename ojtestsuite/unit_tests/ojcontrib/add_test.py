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

"""Tests for the scripts adding users and contests."""

import unittest
from datetime import datetime

from oj.db import Contest, User, init_db
from ojcontrib import datetime_argument, id_list
from ojcontrib.AddContest import add_contest
from ojcontrib.AddUser import add_user
from ojtestsuite.unit_tests.databasemixin import DatabaseMixin
from ojtestsuite.unit_tests.testconfig import DYNAMIC_PROBLEM_ID, \
    ECHO_PROBLEM_ID


START = datetime(2022, 8, 27, 2, 0, 0)
STOP = datetime(2022, 8, 27, 5, 0, 0)


class TestArguments(unittest.TestCase):

    def test_id_list(self):
        self.assertEqual(id_list("1,2,3"), [1, 2, 3])
        self.assertEqual(id_list(" 4 ,,5,"), [4, 5])
        self.assertEqual(id_list(""), [])
        with self.assertRaises(ValueError):
            id_list("1,a")

    def test_datetime_argument(self):
        self.assertEqual(datetime_argument("2022-08-27T02:05:29.000Z"),
                         datetime(2022, 8, 27, 2, 5, 29))
        with self.assertRaises(ValueError):
            datetime_argument("yesterday")


class TestAddUser(DatabaseMixin, unittest.TestCase):

    def tearDown(self):
        self.delete_data()
        init_db()
        super().tearDown()

    def test_success(self):
        self.assertTrue(add_user("alice"))
        users = self.session.query(User).filter(User.name == "alice").all()
        self.assertEqual(len(users), 1)

    def test_success_with_id(self):
        self.assertTrue(add_user("bob", 42))
        self.assertEqual(User.get_from_id(42, self.session).name, "bob")

    def test_fail_duplicate_name(self):
        self.assertTrue(add_user("carol"))
        self.assertFalse(add_user("carol"))

    def test_fail_duplicate_id(self):
        # The root user has id 0.
        self.assertFalse(add_user("dave", 0))


class TestAddContest(DatabaseMixin, unittest.TestCase):

    def setUp(self):
        super().setUp()
        self.user = self.add_user()
        self.session.commit()

    def tearDown(self):
        self.delete_data()
        init_db()
        super().tearDown()

    def test_success(self):
        self.assertTrue(add_contest(
            "final", START, STOP, [DYNAMIC_PROBLEM_ID, ECHO_PROBLEM_ID],
            [self.user.id], 5))
        contest = self.session.query(Contest) \
            .filter(Contest.name == "final").one()
        self.assertEqual(contest.problem_ids,
                         [DYNAMIC_PROBLEM_ID, ECHO_PROBLEM_ID])
        self.assertEqual(contest.user_ids, [self.user.id])
        self.assertEqual(contest.start, START)
        self.assertEqual(contest.submission_limit, 5)

    def test_fail_wrong_times(self):
        self.assertFalse(add_contest("c", STOP, START, [], [], 5))
        self.assertEqual(Contest.count(self.session), 0)

    def test_fail_unknown_problem(self):
        self.assertFalse(add_contest("c", START, STOP, [999], [], 5))
        self.assertEqual(Contest.count(self.session), 0)

    def test_fail_unknown_user(self):
        self.assertFalse(add_contest("c", START, STOP, [ECHO_PROBLEM_ID],
                                     [self.user.id + 100], 5))
        self.assertEqual(Contest.count(self.session), 0)

    def test_fail_duplicates(self):
        self.assertFalse(add_contest(
            "c", START, STOP, [ECHO_PROBLEM_ID, ECHO_PROBLEM_ID], [], 5))
        self.assertEqual(Contest.count(self.session), 0)


if __name__ == "__main__":
    unittest.main()
