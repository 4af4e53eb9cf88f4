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

import logging
from datetime import datetime

from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from oj import ConfigError
from ojcommon.constants import NO_CONTEST_ID
from . import SessionGen, Job, User


logger = logging.getLogger(__name__)


def test_db_connection():
    """Perform an operation that raises if the DB is not reachable.

    raise (ConfigError): if the DB cannot be accessed (usually for
        permission problems or a wrong url).

    """
    try:
        # We do not care of the specific query executed here, we just
        # use it to ensure that the DB is accessible.
        with SessionGen() as session:
            session.execute(text("select 0;"))
    except OperationalError:
        raise ConfigError("Operational error while talking to the DB. "
                          "Is the url in the database section of the "
                          "configuration correct?")


def get_jobs(session, user_id: int | None = None,
             user_name: str | None = None, contest_id: int | None = None,
             problem_id: int | None = None, language: str | None = None,
             from_: datetime | None = None, to: datetime | None = None,
             state: str | None = None, result: str | None = None
             ) -> list[Job]:
    """Search for jobs that match the given criteria, all of them
    optional.

    session (Session): the database session to use.
    user_id: id of the user that submitted.
    user_name: name of the user that submitted.
    contest_id: id of the contest; jobs not in any contest are
        included too.
    problem_id: id of the problem.
    language: name of the language.
    from_: lowest creation time, inclusive.
    to: highest creation time, inclusive.
    state: state of the job.
    result: result of the job.

    return: the jobs matching the criteria, ordered by id.

    """
    query = session.query(Job)
    if user_id is not None:
        query = query.filter(Job.user_id == user_id)
    if user_name is not None:
        query = query.join(User).filter(User.name == user_name)
    if contest_id is not None:
        query = query.filter(Job.contest_id.in_([contest_id, NO_CONTEST_ID]))
    if problem_id is not None:
        query = query.filter(Job.problem_id == problem_id)
    if language is not None:
        query = query.filter(Job.language == language)
    if from_ is not None:
        query = query.filter(Job.created_time >= from_)
    if to is not None:
        query = query.filter(Job.created_time <= to)
    if state is not None:
        query = query.filter(Job.state == state)
    if result is not None:
        query = query.filter(Job.result == result)
    return query.order_by(Job.id).all()
