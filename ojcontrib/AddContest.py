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

"""This script creates a new contest in the database.

"""

import argparse
import logging
import sys

from oj import config
from oj.db import Contest, SessionGen, User
from ojcontrib import datetime_argument, id_list


logger = logging.getLogger(__name__)


def add_contest(name, start, stop, problem_ids, user_ids, submission_limit):
    if stop < start:
        logger.error("The contest ends before starting.")
        return False
    for problem_id in problem_ids:
        if config.get_problem(problem_id) is None:
            logger.error("Problem %d not found in the configuration.",
                         problem_id)
            return False
    if len(set(problem_ids)) != len(problem_ids) \
            or len(set(user_ids)) != len(user_ids):
        logger.error("Duplicate problem or user ids.")
        return False

    logger.info("Creating the contest in the database.")
    with SessionGen() as session:
        for user_id in user_ids:
            if User.get_from_id(user_id, session) is None:
                logger.error("User %d not found.", user_id)
                return False
        contest = Contest(name=name, start=start, stop=stop,
                          problem_ids=problem_ids, user_ids=user_ids,
                          submission_limit=submission_limit)
        session.add(contest)
        session.commit()
        contest_id = contest.id

    logger.info("Contest added with id %d.", contest_id)
    return True


def main():
    """Parse arguments and launch process.

    """
    parser = argparse.ArgumentParser(description="Add a contest to OJ.")
    parser.add_argument("name", action="store",
                        help="name of the contest")
    parser.add_argument("start", action="store", type=datetime_argument,
                        help="start of the contest, in UTC, e.g. "
                             "2022-08-27T02:05:29.000Z")
    parser.add_argument("stop", action="store", type=datetime_argument,
                        help="end of the contest, in UTC")
    parser.add_argument("-p", "--problems", action="store", type=id_list,
                        default=[], help="comma-separated problem ids")
    parser.add_argument("-u", "--users", action="store", type=id_list,
                        default=[], help="comma-separated user ids")
    parser.add_argument("-l", "--submission-limit", action="store", type=int,
                        required=True,
                        help="number of submissions allowed for each user "
                             "and problem")

    args = parser.parse_args()

    success = add_contest(args.name, args.start, args.stop, args.problems,
                          args.users, args.submission_limit)
    return 0 if success is True else 1


if __name__ == "__main__":
    sys.exit(main())
