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

"""Fixed texts written in the info field of a case when the result
is decided by the judge itself rather than by the submission's output.

"""

import typing


class HumanMessage(typing.NamedTuple):
    """A message with a name used to look it up from code."""

    shorthand: str
    message: str

    def format(self, *args) -> str:
        return self.message % args if args else self.message


class MessageCollection:
    """Messages of one step, indexed by shorthand."""

    def __init__(self, messages: typing.Iterable[HumanMessage] = ()):
        self._messages: dict[str, HumanMessage] = {}
        for message in messages:
            if message.shorthand in self._messages:
                raise ValueError(
                    "Duplicate message `%s'." % message.shorthand)
            self._messages[message.shorthand] = message

    def get(self, shorthand: str) -> HumanMessage:
        try:
            return self._messages[shorthand]
        except KeyError:
            raise KeyError("No message called `%s'." % shorthand) from None
