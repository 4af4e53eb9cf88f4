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

"""User-related database interface for SQLAlchemy.

"""

from sqlalchemy.orm import relationship
from sqlalchemy.schema import Column
from sqlalchemy.types import Integer, Unicode

from . import Base


class User(Base):
    """Class to store a user. The user with id 0 is the root user,
    created with the database.

    """

    __tablename__ = 'users'

    # Auto increment primary key.
    id: int = Column(
        Integer,
        primary_key=True)

    # Name of the user, unique.
    name: str = Column(
        Unicode,
        nullable=False,
        unique=True)

    # These one-to-many relationships are the reversed directions of
    # the ones defined in the "child" classes using foreign keys.

    jobs = relationship(
        "Job",
        back_populates="user")

    def export_to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}
