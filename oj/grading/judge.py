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

"""Judging of one submission, from the source to the finished job."""

import functools
import logging
import os
from datetime import datetime

from oj import config, JOB_STATE_FINISHED, RESULT_ACCEPTED, RESULT_WAITING
from oj.conf import LanguageConfig, ProblemConfig
from oj.grading import JobException
from oj.grading.Job import CaseResult, Job, Submission
from oj.grading.Sandbox import Sandbox, SandboxFactory
from oj.grading.steps import EXECUTABLE_FILENAME, OUTPUT_FILENAME, \
    classify, compilation_command, compilation_step, evaluation_step, \
    verifier_step
from oj.log import OperationAdapter


logger = logging.getLogger(__name__)


def _read_file(path: str) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as error:
        raise JobException("Cannot read %s: %s" % (path, error))


def judge(
    job_id: int,
    submission: Submission,
    problem: ProblemConfig,
    language: LanguageConfig,
    created_time: datetime,
    updated_time: datetime,
    sandbox_factory: SandboxFactory = Sandbox,
) -> Job:
    """Compile the submission and run it on every case of the problem.

    The returned job has one case result for the compilation followed
    by one for each case, in order. The result of the job is the result
    of the first case that was not accepted, or Accepted; the score is
    the sum of the scores of the accepted cases (for dynamic ranking
    problems the part depending on the running time is computed by the
    ranking).

    job_id: the id of the job, used to name the workspace.
    submission: what to judge.
    problem: the problem of the submission.
    language: the language of the submission.
    created_time: the creation time to record in the job.
    updated_time: the update time to record in the job.
    sandbox_factory: the function creating the workspace, called with
        a name; the sandbox can be killed from another greenlet.

    return: the finished job.

    raise (JobException): if the workspace cannot be prepared or a
        file of the problem cannot be read; no job is produced.

    """
    operation_logger = OperationAdapter(logger, "job %d" % job_id)
    sandbox = sandbox_factory(name="job%d" % job_id)
    try:
        cases, result, score = _judge_in_sandbox(
            sandbox, submission, problem, language, operation_logger)
    finally:
        # Best effort, a failure here does not invalidate the result.
        sandbox.cleanup(delete=not config.global_.keep_sandbox)

    operation_logger.info("Judged with result %s and score %s.",
                          result, score)
    return Job(job_id, created_time, updated_time, submission,
               JOB_STATE_FINISHED, result, score, cases)


def _judge_in_sandbox(sandbox, submission, problem, language, logger):
    """Do the work of judge() inside the given sandbox.

    return ((list[CaseResult], str, float)): the case results, the
        result and the score of the job.

    """
    sandbox.create_file_from_string(language.file_name,
                                    submission.source_code.encode("utf-8"))

    # Compilation.
    command = compilation_command(
        language.command,
        sandbox.relative_path(language.file_name),
        sandbox.relative_path(EXECUTABLE_FILENAME))
    compilation_success, compilation_result, info, stats = \
        compilation_step(sandbox, command)
    cases = [CaseResult(0, compilation_result, stats["execution_time"],
                        0, info)]

    if not compilation_success:
        logger.info("Compilation failed.")
        cases.extend(CaseResult(i, RESULT_WAITING)
                     for i in range(1, len(problem.cases) + 1))
        return cases, compilation_result, 0.0

    # Evaluation of each case.
    result = RESULT_ACCEPTED
    score = 0.0
    executable = [sandbox.relative_path(EXECUTABLE_FILENAME)]
    output_path = sandbox.relative_path(OUTPUT_FILENAME)
    for i, case in enumerate(problem.cases, start=1):
        # Commands run inside the sandbox, so paths must not be relative.
        input_file = os.path.abspath(case.input_file)
        answer_file = os.path.abspath(case.answer_file)
        answer = _read_file(answer_file)
        evaluation_success, case_result, info, stats = evaluation_step(
            sandbox, executable, time_limit=case.time_limit,
            stdin_redirect=input_file, stdout_redirect=OUTPUT_FILENAME)

        if evaluation_success:
            verifier = None
            if problem.misc.special_judge is not None:
                verifier = functools.partial(
                    verifier_step, sandbox, problem.misc.special_judge,
                    answer_file, output_path)
            case_result, info = classify(
                problem.type_, answer,
                sandbox.get_file_to_string(OUTPUT_FILENAME), verifier)

        logger.debug("Case %d: %s.", i, case_result)
        if case_result == RESULT_ACCEPTED:
            score += case.score
        elif result == RESULT_ACCEPTED:
            result = case_result
        cases.append(CaseResult(i, case_result, stats["execution_time"],
                                0, info))

    return cases, result, score
