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

"""Configuration used by the unit tests.

The configuration file, the SQLite database, the sandboxes and the
files of the problems all live in a temporary directory created on
import.

"""

import atexit
import json
import os
import shutil
import tempfile


BASE_DIR = tempfile.mkdtemp(prefix="oj-unit-tests-")
atexit.register(shutil.rmtree, BASE_DIR, ignore_errors=True)


# A "language" whose compiler copies the source, a shell script, to
# the executable.
SHELL_LANGUAGE = "sh"
SHELL_COMPILER = ["/bin/sh", "-c", "cp \"$0\" \"$1\" && chmod +x \"$1\"",
                  "%INPUT%", "%OUTPUT%"]

# Problem ids.
ECHO_PROBLEM_ID = 1
DYNAMIC_PROBLEM_ID = 2

# Submissions to the problems.
CAT_SOURCE = "#!/bin/sh\ncat\n"
WRONG_SOURCE = "#!/bin/sh\necho nope\n"


def _write(name, content):
    path = os.path.join(BASE_DIR, name)
    with open(path, "wt", encoding="utf-8") as f:
        f.write(content)
    return path


def _quote(value):
    # JSON strings are valid TOML basic strings.
    return json.dumps(value)


def write_test_config():
    """Write the configuration file and the files it refers to.

    return (str): the path of the configuration file.

    """
    os.mkdir(os.path.join(BASE_DIR, "tmp"))
    cases = [
        (_write("1.in", "a\n"), _write("1.ans", "a\n")),
        (_write("2.in", "b\n"), _write("2.ans", "c\n")),
        (_write("3.in", "x\n"), _write("3.ans", "x\n")),
    ]

    lines = [
        "[global]",
        "temp_dir = %s" % _quote(os.path.join(BASE_DIR, "tmp")),
        "log_dir = %s" % _quote(os.path.join(BASE_DIR, "log")),
        "",
        "[database]",
        "url = %s" % _quote("sqlite:///" + os.path.join(
            BASE_DIR, "oj-fortesting.db")),
        "",
        "[judge]",
        "workers = 2",
        "",
        "[[languages]]",
        "name = %s" % _quote(SHELL_LANGUAGE),
        "file_name = \"main.sh\"",
        "command = [%s]" % ", ".join(_quote(t) for t in SHELL_COMPILER),
        "",
        "[[problems]]",
        "id = %d" % ECHO_PROBLEM_ID,
        "name = \"echo\"",
        "type = \"standard\"",
        "",
        "[[problems.cases]]",
        "score = 60.0",
        "input_file = %s" % _quote(cases[0][0]),
        "answer_file = %s" % _quote(cases[0][1]),
        "time_limit = 2000000",
        "",
        "[[problems.cases]]",
        "score = 40.0",
        "input_file = %s" % _quote(cases[1][0]),
        "answer_file = %s" % _quote(cases[1][1]),
        "time_limit = 2000000",
        "",
        "[[problems]]",
        "id = %d" % DYNAMIC_PROBLEM_ID,
        "name = \"fast echo\"",
        "type = \"dynamic_ranking\"",
        "",
        "[problems.misc]",
        "dynamic_ranking_ratio = 0.5",
        "",
        "[[problems.cases]]",
        "score = 100.0",
        "input_file = %s" % _quote(cases[2][0]),
        "answer_file = %s" % _quote(cases[2][1]),
        "",
    ]
    return _write("oj.toml", "\n".join(lines))
