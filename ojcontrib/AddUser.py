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

"""This script creates a new user in the database.

"""

import argparse
import logging
import sys

from sqlalchemy.exc import IntegrityError

from oj.db import SessionGen, User


logger = logging.getLogger(__name__)


def add_user(name, user_id=None):
    logger.info("Creating the user in the database.")
    user = User(id=user_id, name=name)
    try:
        with SessionGen() as session:
            session.add(user)
            session.commit()
            user_id = user.id
    except IntegrityError:
        logger.error("A user with the given name or id already exists.")
        return False

    logger.info("User %s added with id %d.", name, user_id)
    return True


def main():
    """Parse arguments and launch process.

    """
    parser = argparse.ArgumentParser(description="Add a user to OJ.")
    parser.add_argument("name", action="store",
                        help="name of the user")
    parser.add_argument("-i", "--id", action="store", type=int,
                        help="id of the user (a new one if omitted)")

    args = parser.parse_args()

    success = add_user(args.name, args.id)
    return 0 if success is True else 1


if __name__ == "__main__":
    sys.exit(main())
