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

"""Create the tables in the database and the root user.

"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from ojcommon.constants import ROOT_USER_ID, ROOT_USER_NAME
from . import SessionGen, User, engine, metadata


logger = logging.getLogger(__name__)


def init_db() -> bool:
    """Create all the tables that are missing and the root user, if
    it does not exist yet.

    return: True if successful.

    """
    try:
        metadata.create_all(engine)
        with SessionGen() as session:
            if User.get_from_id(ROOT_USER_ID, session) is None:
                logger.info("Creating the %s user.", ROOT_USER_NAME)
                session.add(User(id=ROOT_USER_ID, name=ROOT_USER_NAME))
                session.commit()
    except SQLAlchemyError:
        logger.error("Cannot initialize the database.", exc_info=True)
        return False
    return True
