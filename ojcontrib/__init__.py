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

"""Utilities for ojcontrib"""

from ojcommon.datetime import parse_datetime


def id_list(value):
    """Parse a comma-separated list of ids, for argparse.

    value (str): e.g. "1,2,3"; empty items are ignored.

    return ([int]): the ids.

    raise (ValueError): if an item is not an integer.

    """
    return [int(item) for item in value.split(",") if item.strip() != ""]


def datetime_argument(value):
    """Parse a datetime in the exchange format, for argparse."""
    return parse_datetime(value)
