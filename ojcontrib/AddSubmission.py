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

"""This script adds a submission to the database and judges it,
printing the resulting job.

"""

# We enable monkey patching to make many libraries gevent-friendly.
import gevent.monkey
gevent.monkey.patch_all()  # noqa

import argparse
import json
import logging
import sys

from oj import config
from oj.db import Job, SessionGen
from oj.log import initialize_logging
from oj.grading.Job import Submission
from oj.service import ValidationError
from oj.service.JudgeService import JudgeService
from ojcommon.constants import NO_CONTEST_ID


logger = logging.getLogger(__name__)


def add_submission(user_id, problem_id, language, source_path,
                   contest_id=NO_CONTEST_ID):
    try:
        with open(source_path, "rt", encoding="utf-8") as source_file:
            source_code = source_file.read()
    except OSError as error:
        logger.error("Cannot read %s: %s.", source_path, error)
        return False

    submission = Submission(source_code, language, user_id, contest_id,
                            problem_id)
    service = JudgeService()
    try:
        job_id = service.submit(submission)
    except ValidationError as error:
        logger.error("Submission refused (%s): %s", error.reason,
                     error.message)
        return False
    service.join()

    with SessionGen() as session:
        job = Job.get_from_id(job_id, session).to_grading_job()
    print(json.dumps(job.export_to_dict(), indent=2))
    return True


def main():
    """Parse arguments and launch process.

    """
    parser = argparse.ArgumentParser(
        description="Add a submission to OJ and judge it.")
    parser.add_argument("user_id", action="store", type=int,
                        help="id of the user submitting")
    parser.add_argument("problem_id", action="store", type=int,
                        help="id of the problem")
    parser.add_argument("language", action="store",
                        help="name of the language")
    parser.add_argument("source", action="store",
                        help="path of the source file")
    parser.add_argument("-c", "--contest-id", action="store", type=int,
                        default=NO_CONTEST_ID,
                        help="id of the contest (none if omitted)")

    args = parser.parse_args()
    initialize_logging("AddSubmission", config.global_.log_dir,
                       config.global_.file_log_debug)

    success = add_submission(args.user_id, args.problem_id, args.language,
                             args.source, args.contest_id)
    return 0 if success is True else 1


if __name__ == "__main__":
    sys.exit(main())
