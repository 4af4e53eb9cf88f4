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

"""Service accepting submissions and judging them in the background.

Submitting only validates and stores a queued job; a greenlet per job
waits for one of the judging slots, judges the submission and stores
the result. At most one judgment of the same job runs at any time, and
a judgment can be canceled, killing the program it is running.

"""

import logging
import time

import gevent
import gevent.lock
import gevent.pool

from ojcommon.constants import NO_CONTEST_ID
from ojcommon.datetime import make_datetime
from ojranking import RankingRule, rank
from oj import config, JOB_STATE_CANCELED, JOB_STATE_FINISHED, \
    JOB_STATE_QUEUEING, JOB_STATE_RUNNING, RESULT_RUNNING, \
    RESULT_SYSTEM_ERROR, RESULT_WAITING
from oj.db import Contest, Job, SessionGen, User, get_jobs
from oj.grading import JobException
from oj.grading.Job import CaseResult, Job as GradingJob, Submission
from oj.grading.Sandbox import Sandbox, SandboxFactory
from oj.grading.judge import judge
from . import ERR_INVALID_STATE, ERR_NOT_FOUND, ValidationError
from .submission import check_submission


logger = logging.getLogger(__name__)


class JudgeService:
    """Judge submissions with a bounded number of parallel judgments."""

    def __init__(
        self,
        workers: int | None = None,
        sandbox_factory: SandboxFactory = Sandbox,
    ):
        """Initialization.

        workers: the number of submissions judged at the same time;
            if None, the one in the configuration is used.
        sandbox_factory: passed to judge().

        """
        if workers is None:
            workers = config.judge.workers
        self.sandbox_factory = sandbox_factory

        self._slots = gevent.lock.BoundedSemaphore(workers)
        self._greenlets = gevent.pool.Group()
        # Job id -> greenlet judging it.
        self._judging: dict[int, gevent.Greenlet] = {}
        self.work_lock = gevent.lock.RLock()

    def submit(self, submission: Submission) -> int:
        """Validate and store a submission, and queue it for judging.

        submission: the submission.

        return: the id of the new job.

        raise (ValidationError): if the submission is not acceptable.

        """
        timestamp = make_datetime()
        with self.work_lock:
            with SessionGen() as session:
                check_submission(session, submission, timestamp)
                record = Job.from_grading_job(GradingJob(
                    None, timestamp, timestamp, submission))
                session.add(record)
                session.commit()
                job_id = record.id
            logger.info("New submission of user %d for problem %d.",
                        submission.user_id, submission.problem_id,
                        extra={"operation": "job %d" % job_id})
            self._enqueue(job_id)
        return job_id

    def rejudge(self, job_id: int):
        """Queue an existing job for judging again. Its result is
        replaced, its id and creation time are kept.

        raise (ValidationError): if the job does not exist or is being
            judged.

        """
        with self.work_lock:
            if job_id in self._judging:
                raise ValidationError(
                    ERR_INVALID_STATE, "Job %d is being judged." % job_id)
            with SessionGen() as session:
                record = Job.get_from_id(job_id, session)
                if record is None:
                    raise ValidationError(
                        ERR_NOT_FOUND, "Job %d not found." % job_id)
                record.state = JOB_STATE_QUEUEING
                record.result = RESULT_WAITING
                record.updated_time = make_datetime()
                session.commit()
            logger.info("Rejudging.", extra={"operation": "job %d" % job_id})
            self._enqueue(job_id)

    def cancel(self, job_id: int):
        """Stop judging a job, killing the program it is running, and
        mark it as canceled.

        raise (ValidationError): if the job does not exist or is not
            queued or running.

        """
        with self.work_lock:
            with SessionGen() as session:
                record = Job.get_from_id(job_id, session)
                if record is None:
                    raise ValidationError(
                        ERR_NOT_FOUND, "Job %d not found." % job_id)
                if record.state not in (JOB_STATE_QUEUEING,
                                        JOB_STATE_RUNNING):
                    raise ValidationError(
                        ERR_INVALID_STATE,
                        "Job %d is %s." % (job_id, record.state))

                greenlet = self._judging.get(job_id)
                if greenlet is not None:
                    # The sandbox kills its program and the judge
                    # deletes the sandbox on the way out.
                    greenlet.kill(block=True)
                    self._forget(job_id, greenlet)

                record.state = JOB_STATE_CANCELED
                record.updated_time = make_datetime()
                session.commit()
            logger.info("Canceled.", extra={"operation": "job %d" % job_id})

    def get_ranking(
        self, contest_id: int, rule: RankingRule | None = None
    ) -> list:
        """Compute the standings of a contest, or the global ones if
        contest_id is 0, from the jobs finished so far.

        return ([UserRanking]): the standings.

        raise (ValidationError): if the contest does not exist, or a
            problem cannot be ranked.

        """
        with SessionGen() as session:
            contest = None
            if contest_id != NO_CONTEST_ID:
                contest = Contest.get_from_id(contest_id, session)
                if contest is None:
                    raise ValidationError(
                        ERR_NOT_FOUND, "Contest %d not found." % contest_id)
            jobs = [record.to_grading_job() for record in get_jobs(
                session, contest_id=contest_id, state=JOB_STATE_FINISHED)]
            users = User.get_all(session)
            return rank(jobs, users, config.problems, rule, contest)

    def is_judging(self, job_id: int) -> bool:
        return job_id in self._judging

    def join(self, timeout: float | None = None):
        """Wait until all the queued judgments are done."""
        self._greenlets.join(timeout=timeout)

    def _enqueue(self, job_id: int):
        greenlet = gevent.Greenlet(self._judge, job_id)
        self._judging[job_id] = greenlet
        greenlet.link(lambda g: self._forget(job_id, g))
        self._greenlets.start(greenlet)

    def _forget(self, job_id: int, greenlet: gevent.Greenlet):
        if self._judging.get(job_id) is greenlet:
            del self._judging[job_id]

    def _judge(self, job_id: int):
        """Wait for a free slot, then judge the job and store the
        result. Whatever goes wrong, the job ends up Finished.

        """
        operation = {"operation": "job %d" % job_id}
        with self._slots:
            try:
                self._judge_and_store(job_id, operation)
            except Exception as error:
                logger.error("Unexpected error while judging.",
                             exc_info=True, extra=operation)
                self._store_system_error(
                    job_id, "Internal error: %s" % error, operation)

    def _judge_and_store(self, job_id: int, operation: dict):
        with SessionGen() as session:
            record = Job.get_from_id(job_id, session)
            record.state = JOB_STATE_RUNNING
            record.result = RESULT_RUNNING
            session.commit()
            submission = record.get_submission()
            created_time = record.created_time
            updated_time = record.updated_time

        start_time = time.monotonic()
        logger.info("Starting job.", extra=operation)
        problem = config.get_problem(submission.problem_id)
        language = config.get_language(submission.language)
        try:
            if problem is None or language is None:
                raise JobException("Problem or language not configured.")
            job = judge(job_id, submission, problem, language,
                        created_time, updated_time, self.sandbox_factory)
        except JobException as error:
            logger.error("Judging failed: %s.", error.msg, extra=operation)
            job = _system_error_job(job_id, submission, problem,
                                    created_time, updated_time, error.msg)

        with SessionGen() as session:
            record = Job.get_from_id(job_id, session)
            record.set_judgment(job)
            session.commit()
        logger.info("Finished job in %.3lf s.",
                    time.monotonic() - start_time, extra=operation)

    def _store_system_error(self, job_id: int, message: str,
                            operation: dict):
        try:
            with SessionGen() as session:
                record = Job.get_from_id(job_id, session)
                submission = record.get_submission()
                job = _system_error_job(
                    job_id, submission,
                    config.get_problem(submission.problem_id),
                    record.created_time, record.updated_time, message)
                record.set_judgment(job)
                session.commit()
        except Exception:
            logger.critical("Cannot store the failure of the job, it is "
                            "left unfinished.", exc_info=True,
                            extra=operation)


def _system_error_job(job_id, submission, problem, created_time,
                      updated_time, message):
    """Return a finished job reporting a failure of the system."""
    number_of_cases = len(problem.cases) if problem is not None else 0
    cases = [CaseResult(0, RESULT_SYSTEM_ERROR, info=message)]
    cases.extend(CaseResult(i) for i in range(1, number_of_cases + 1))
    return GradingJob(job_id, created_time, updated_time, submission,
                      JOB_STATE_FINISHED, RESULT_SYSTEM_ERROR, 0.0, cases)
