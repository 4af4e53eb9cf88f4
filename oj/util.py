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

"""Filesystem helpers shared by the judge."""

import logging
import os
import stat

import gevent


logger = logging.getLogger(__name__)


def rmtree(path: str):
    """Delete the directory at path together with its content.

    Symbolic links inside the tree are removed and never followed, so
    a program writing links in its sandbox cannot make us delete files
    elsewhere. The walk yields to other greenlets after each removal.

    path: the directory to delete; if it is a symbolic link, only the
        link is removed.

    raise (OSError): if something cannot be removed.

    """
    # fwalk() does not descend into symbolic links.
    for _, dirnames, filenames, dirfd in os.fwalk(path, topdown=False):
        for name in filenames + dirnames:
            if stat.S_ISDIR(os.lstat(name, dir_fd=dirfd).st_mode):
                os.rmdir(name, dir_fd=dirfd)
            else:
                os.remove(name, dir_fd=dirfd)
            gevent.sleep(0)
    if os.path.islink(path):
        os.remove(path)
    else:
        os.rmdir(path)
