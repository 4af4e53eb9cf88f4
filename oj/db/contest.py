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

"""Contest-related database interface for SQLAlchemy.

"""

from datetime import datetime

from sqlalchemy.schema import CheckConstraint, Column
from sqlalchemy.types import DateTime, Integer, JSON, Unicode

from ojcommon.datetime import format_datetime
from . import Base


class Contest(Base):
    """Class to store a contest: the problems it uses, the users that
    can take part and when they can submit.

    """
    __tablename__ = 'contests'
    __table_args__ = (
        CheckConstraint("start <= stop"),
        CheckConstraint("submission_limit >= 0"),
    )

    # Auto increment primary key. Ids start from 1, 0 means "no
    # contest" in jobs.
    id: int = Column(
        Integer,
        primary_key=True)

    name: str = Column(
        Unicode,
        nullable=False)

    # Submissions are accepted in [start, stop).
    start: datetime = Column(
        DateTime,
        nullable=False)
    stop: datetime = Column(
        DateTime,
        nullable=False)

    # Ids of the problems in the configuration, in the order they
    # appear in the standings.
    problem_ids: list[int] = Column(
        JSON,
        nullable=False,
        default=list)

    # Ids of the users that can submit.
    user_ids: list[int] = Column(
        JSON,
        nullable=False,
        default=list)

    # Maximum number of submissions of a user for each problem.
    submission_limit: int = Column(
        Integer,
        nullable=False)

    def phase(self, timestamp: datetime) -> int:
        """Return: -1 if the contest has not started yet at timestamp,
        0 if it is running, +1 if it is over.

        """
        if timestamp < self.start:
            return -1
        if timestamp < self.stop:
            return 0
        return +1

    def export_to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "from": format_datetime(self.start),
            "to": format_datetime(self.stop),
            "problem_ids": list(self.problem_ids),
            "user_ids": list(self.user_ids),
            "submission_limit": self.submission_limit,
        }
