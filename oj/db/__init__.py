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

"""Utilities functions that interacts with the database.

"""

import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import configure_mappers

from oj import config


logger = logging.getLogger(__name__)


# Define what this package will provide.

__all__ = [
    "version", "engine",
    # session
    "Session", "SessionGen",
    # base
    "metadata", "Base",
    # user
    "User",
    # contest
    "Contest",
    # job
    "Job",
    # init
    "init_db",
    # drop
    "drop_db",
    # util
    "test_db_connection", "get_jobs",
]


# Instantiate or import these objects.

version = 1

engine = create_engine(config.database.url, echo=config.database.debug)


from .session import Session, SessionGen

from .base import metadata, Base
from .user import User
from .contest import Contest
from .job import Job

from .init import init_db
from .drop import drop_db

from .util import test_db_connection, get_jobs


configure_mappers()
