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

"""Mixin giving each test a private scratch directory, removed at the
end of the test whatever its outcome.

"""

import os
import shutil
import tempfile


class FileSystemMixin:

    def setUp(self):
        super().setUp()
        self.base_dir = tempfile.mkdtemp(prefix="oj-test-")
        self.addCleanup(shutil.rmtree, self.base_dir, ignore_errors=True)

    def get_path(self, inner_path):
        return os.path.join(self.base_dir, inner_path)

    def write_file(self, inner_path, content):
        """Write content (bytes, or str stored as UTF-8) to inner_path,
        creating missing parent directories, and return the full path.

        """
        path = self.get_path(inner_path)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        if isinstance(content, str):
            content = content.encode("utf-8")
        with open(path, "wb") as f:
            f.write(content)
        return path
