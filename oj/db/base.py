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

import typing

from sqlalchemy import func
from sqlalchemy.orm import declarative_base, object_mapper
from sqlalchemy.orm.session import object_session

if typing.TYPE_CHECKING:
    from sqlalchemy.orm import Session


_T = typing.TypeVar("_T", bound="Base")


class Base:
    """Base class for all classes managed by SQLAlchemy. Extending the
    base class given by SQLAlchemy.

    """
    # Columns are declared as "name: type = Column(...)", without the
    # Mapped[] wrapper.
    __allow_unmapped__ = True

    @property
    def sa_mapper(self):
        return object_mapper(self)

    @property
    def sa_session(self):
        return object_session(self)

    @classmethod
    def get_from_id(cls: type[_T], id_: int, session: "Session") -> _T | None:
        """Retrieve an object from the database by its ID.

        Use the given session to fetch the object of this class with
        the given ID, and return it. If it doesn't exist return None.

        id_: the ID of the object we want.
        session: the session to query.

        return: the desired object, or None if not found.

        """
        return session.get(cls, id_)

    @classmethod
    def get_all(cls: type[_T], session: "Session") -> list[_T]:
        """Return all the objects of this class, ordered by ID."""
        return session.query(cls).order_by(cls.id).all()

    @classmethod
    def count(cls, session: "Session") -> int:
        """Return the number of objects of this class."""
        return session.query(func.count(cls.id)).scalar()

    def get_attrs(self) -> dict[str, object]:
        """Return the column properties of this object as a dict."""
        return {column.key: getattr(self, column.key)
                for column in self.sa_mapper.column_attrs}

    def set_attrs(self, attrs: dict[str, object]):
        """Set the column properties given in attrs.

        raise (TypeError): if a key is not a column property.

        """
        keys = set(column.key for column in self.sa_mapper.column_attrs)
        for key, value in attrs.items():
            if key not in keys:
                raise TypeError(
                    "set_attrs() got an unexpected keyword argument '%s'" %
                    key)
            setattr(self, key, value)


Base = declarative_base(cls=Base)


metadata = Base.metadata
