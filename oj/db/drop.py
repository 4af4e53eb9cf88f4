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

"""Drop all content and tables in the database.

"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from . import engine, metadata


logger = logging.getLogger(__name__)


def drop_db() -> bool:
    """Drop everything in the database.

    return: True if successful.

    """
    try:
        metadata.drop_all(engine)
    except SQLAlchemyError:
        logger.error("Couldn't drop the tables.", exc_info=True)
        return False
    return True
