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

"""Helpers for the UTC datetimes stored in jobs and contests.

All datetimes handled by OJ are naive and implicitly in UTC, both in
memory and in the database.

"""

import time
from datetime import datetime, timezone


__all__ = [
    "make_datetime", "make_timestamp", "format_datetime", "parse_datetime",
    "DATETIME_FORMAT",
    ]


# Format used when exchanging datetimes as strings, e.g. 2022-08-27T02:05:29.000Z
DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


def make_datetime(timestamp: int | float | None = None) -> datetime:
    """Return the datetime object associated with the given timestamp.

    timestamp: a POSIX timestamp, or None to use now.

    return: the datetime representing the UTC time of the
        given timestamp.

    """
    if timestamp is None:
        timestamp = time.time()
    return datetime.fromtimestamp(timestamp, timezone.utc) \
        .replace(tzinfo=None)


EPOCH = datetime(1970, 1, 1)


def make_timestamp(_datetime: datetime | None = None) -> float:
    """Return the timestamp associated with the given datetime object.

    _datetime: a datetime object, or None to use now.

    return: the POSIX timestamp corresponding to the given
        datetime ("read" in UTC).

    """
    if _datetime is None:
        return time.time()
    else:
        return (_datetime - EPOCH).total_seconds()


def format_datetime(_datetime: datetime) -> str:
    """Format a datetime with millisecond precision and a Z suffix."""
    return _datetime.strftime(DATETIME_FORMAT)[:-4] + "Z"


def parse_datetime(value: str) -> datetime:
    """Inverse of format_datetime.

    raise (ValueError): if value is not in the expected format.

    """
    return datetime.strptime(value, DATETIME_FORMAT)
