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

"""Session factory bound to the configured engine, and the context
manager every component uses to talk to the database.

"""

import logging

import sqlalchemy.orm

from . import engine


logger = logging.getLogger(__name__)


Session = sqlalchemy.orm.sessionmaker(engine)


class SessionGen:
    """Open a session for the length of a with block:

    with SessionGen() as session:
        job = Job.get_from_id(job_id, session)
        job.state = JOB_STATE_RUNNING
        session.commit()

    Whatever was not committed explicitly is rolled back on exit, also
    when the block raises, and the session is closed.

    """

    def __init__(self):
        self.session: sqlalchemy.orm.Session | None = None

    def __enter__(self) -> sqlalchemy.orm.Session:
        self.session = Session()
        return self.session

    def __exit__(self, exc_type, exc_value, traceback):
        try:
            self.session.rollback()
        finally:
            self.session.close()
            self.session = None
