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

"""Services built on the judge and the ranking, and the errors they
report to their callers.

"""

import logging


logger = logging.getLogger(__name__)


# Reasons of a ValidationError, as reported to the caller.
ERR_INVALID_ARGUMENT = "ERR_INVALID_ARGUMENT"
ERR_INVALID_STATE = "ERR_INVALID_STATE"
ERR_NOT_FOUND = "ERR_NOT_FOUND"
ERR_RATE_LIMIT = "ERR_RATE_LIMIT"


class ValidationError(Exception):
    """A request cannot be satisfied because of its arguments or of the
    state of the system. Nothing is changed when this is raised.

    """

    def __init__(self, reason, message):
        super().__init__(message)
        self.reason = reason
        self.message = message

    def __repr__(self):
        return "ValidationError(%s, %r)" % (self.reason, self.message)

    def export_to_dict(self):
        return {"reason": self.reason, "message": self.message}
