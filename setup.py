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

"""Build and installation routines for OJ.

"""

import os
import re

from setuptools import setup, find_packages


def find_version():
    """Return the version string obtained from oj/__init__.py"""
    path = os.path.join("oj", "__init__.py")
    with open(path, "rt", encoding="utf-8") as f:
        version_match = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]",
                                  f.read(), re.M)
    if version_match is not None:
        return version_match.group(1)
    raise RuntimeError("Unable to find version string.")


setup(
    name="oj",
    version=find_version(),
    author="The OJ development team",
    description="An online judge: judging pipeline and ranking engine",
    packages=find_packages(include=["oj", "oj.*", "ojcommon", "ojcommon.*",
                                    "ojcontrib", "ojcontrib.*",
                                    "ojranking", "ojranking.*",
                                    "ojtestsuite", "ojtestsuite.*"]),
    python_requires=">=3.11",
    install_requires=[
        "gevent",
        "sqlalchemy>=2.0",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "ojInitDB=ojcontrib.InitDB:main",
            "ojAddUser=ojcontrib.AddUser:main",
            "ojAddContest=ojcontrib.AddContest:main",
            "ojAddSubmission=ojcontrib.AddSubmission:main",
            "ojRejudge=ojcontrib.Rejudge:main",
            "ojRanking=ojcontrib.Ranking:main",
        ],
    },
    keywords="online judge programming contest grader ranking",
    license="Affero General Public License v3",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Natural Language :: English",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3.11",
        "License :: OSI Approved :: "
        "GNU Affero General Public License v3",
    ]
)
