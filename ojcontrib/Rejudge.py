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

"""This script judges again some jobs already in the database.

"""

# We enable monkey patching to make many libraries gevent-friendly.
import gevent.monkey
gevent.monkey.patch_all()  # noqa

import argparse
import logging
import sys

from oj import config
from oj.db import SessionGen, get_jobs
from oj.log import initialize_logging
from oj.service import ValidationError
from oj.service.JudgeService import JudgeService


logger = logging.getLogger(__name__)


def rejudge(job_ids=None, problem_id=None):
    """Judge again the given jobs, or all the jobs of a problem.

    job_ids ([int]|None): the ids of the jobs.
    problem_id (int|None): if given, all the jobs of this problem are
        judged again, in addition to job_ids.

    return (bool): True if all the jobs were judged again.

    """
    job_ids = list(job_ids) if job_ids is not None else []
    if problem_id is not None:
        with SessionGen() as session:
            job_ids.extend(job.id for job in get_jobs(
                session, problem_id=problem_id))

    service = JudgeService()
    success = True
    for job_id in job_ids:
        try:
            service.rejudge(job_id)
        except ValidationError as error:
            logger.error("Cannot rejudge job %d: %s", job_id, error.message)
            success = False
    service.join()

    logger.info("Judged again %d jobs.", len(job_ids))
    return success


def main():
    """Parse arguments and launch process.

    """
    parser = argparse.ArgumentParser(description="Judge jobs again.")
    parser.add_argument("job_ids", action="store", type=int, nargs="*",
                        help="ids of the jobs")
    parser.add_argument("-p", "--problem-id", action="store", type=int,
                        help="judge again all the jobs of this problem")

    args = parser.parse_args()

    if len(args.job_ids) == 0 and args.problem_id is None:
        parser.error("no job ids nor problem given")
    initialize_logging("Rejudge", config.global_.log_dir,
                       config.global_.file_log_debug)

    success = rejudge(args.job_ids, args.problem_id)
    return 0 if success is True else 1


if __name__ == "__main__":
    sys.exit(main())
