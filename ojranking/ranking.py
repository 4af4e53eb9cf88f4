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

"""Computation of the standings of a contest, or of the global ones.

For each user and problem in scope a representative job is chosen and
scored; users are sorted by the sum of their scores and then by the
tie breaker, and get a competition rank ("1-2-2-4"): users equal in
both total score and tie breaker share the rank, and the following
user's rank is its position in the list.

"""

import logging
from collections import defaultdict
from datetime import datetime
from itertools import groupby

from ojcommon.constants import NO_CONTEST_ID, \
    PROBLEM_TYPE_DYNAMIC_RANKING, SCORING_RULE_HIGHEST, \
    SCORING_RULE_LATEST, TIE_BREAKER_SUBMISSION_COUNT, \
    TIE_BREAKER_SUBMISSION_TIME, TIE_BREAKER_USER_ID
from oj import JOB_STATE_FINISHED, RESULT_ACCEPTED
from oj.service import ERR_INVALID_ARGUMENT, ValidationError


logger = logging.getLogger(__name__)


SCORING_RULES = [SCORING_RULE_LATEST, SCORING_RULE_HIGHEST]
TIE_BREAKERS = [TIE_BREAKER_SUBMISSION_TIME, TIE_BREAKER_SUBMISSION_COUNT,
                TIE_BREAKER_USER_ID]


class RankingRule:
    """How to choose the job of a user for a problem, and how to order
    users with the same total score.

    """

    def __init__(self, scoring_rule=None, tie_breaker=None):
        """Initialization.

        scoring_rule (str|None): "latest" (the default) to use the last
            job, "highest" to use the job with the highest score.
        tie_breaker (str|None): "submission_time", "submission_count",
            "user_id" or None. With None users with the same total
            share the rank (and are listed by id).

        raise (ValidationError): if the values are not recognized.

        """
        if scoring_rule is None:
            scoring_rule = SCORING_RULE_LATEST
        if scoring_rule not in SCORING_RULES:
            raise ValidationError(ERR_INVALID_ARGUMENT,
                                  "Unknown scoring rule %r." % scoring_rule)
        if tie_breaker is not None and tie_breaker not in TIE_BREAKERS:
            raise ValidationError(ERR_INVALID_ARGUMENT,
                                  "Unknown tie breaker %r." % tie_breaker)
        self.scoring_rule = scoring_rule
        self.tie_breaker = tie_breaker

    def select(self, jobs):
        """Return the representative job among the given ones, or None
        if there are none.

        """
        if len(jobs) == 0:
            return None
        if self.scoring_rule == SCORING_RULE_HIGHEST:
            return max(jobs, key=lambda job: job.score)
        return max(jobs, key=lambda job: job.created_time)


class UserRanking:
    """The line of a user in the standings."""

    def __init__(self, user_id, user_name, scores, max_time,
                 submission_count):
        self.user_id = user_id
        self.user_name = user_name
        self.scores = scores
        # Creation time of the last job of the user, datetime.max if
        # the user never submitted.
        self.max_time = max_time
        self.submission_count = submission_count
        self.rank = 0

    @property
    def total(self):
        return sum(self.scores)

    def __repr__(self):
        return "UserRanking(%d, rank=%d, total=%s)" % (
            self.user_id, self.rank, self.total)

    def export_to_dict(self):
        return {
            "user": {"id": self.user_id, "name": self.user_name},
            "rank": self.rank,
            "scores": self.scores,
        }


def _tie_breaker_key(ranking, tie_breaker):
    if tie_breaker == TIE_BREAKER_SUBMISSION_TIME:
        return ranking.max_time
    elif tie_breaker == TIE_BREAKER_SUBMISSION_COUNT:
        return ranking.submission_count
    elif tie_breaker == TIE_BREAKER_USER_ID:
        return ranking.user_id
    return None


def _fastest_times(problem, jobs):
    """Return, for each case of the problem, the lowest time among the
    accepted jobs given.

    """
    fastest = [None] * len(problem.cases)
    for job in jobs:
        if job.result != RESULT_ACCEPTED:
            continue
        for i in range(len(problem.cases)):
            time = job.cases[i + 1].time
            if fastest[i] is None or time < fastest[i]:
                fastest[i] = time
    return fastest


def _dynamic_score(problem, jobs, fastest, rule):
    ratio = problem.misc.dynamic_ranking_ratio
    accepted = [job for job in jobs if job.result == RESULT_ACCEPTED]
    if len(accepted) == 0:
        job = rule.select(jobs)
        return job.score * (1.0 - ratio) if job is not None else 0.0

    job = max(accepted, key=lambda job: job.created_time)
    score = 0.0
    for i, case in enumerate(problem.cases):
        time = job.cases[i + 1].time
        # A job running in no measurable time is as fast as possible.
        speed = fastest[i] / time if time > 0 else 1.0
        score += case.score * (1.0 - ratio) + case.score * ratio * speed
    return score


def rank(jobs, users, problems, rule=None, contest=None):
    """Compute the standings.

    jobs ([Job]): the jobs to consider; only finished ones are used,
        and only if their contest is the one ranked or no contest.
    users ([object]): the users, with id and name attributes.
    problems ([ProblemConfig]): the problems.
    rule (RankingRule|None): the rule to apply, None for the default.
    contest (object|None): the contest to rank, with id, user_ids and
        problem_ids attributes; None for the global standings, that
        include all users and problems.

    return ([UserRanking]): the standings, in order.

    raise (ValidationError): if a dynamic ranking problem in scope
        does not define its ratio.

    """
    if rule is None:
        rule = RankingRule()

    if contest is None:
        scope_id = NO_CONTEST_ID
    else:
        scope_id = contest.id
        users_by_id = {user.id: user for user in users}
        problems_by_id = {problem.id: problem for problem in problems}
        users = [users_by_id[user_id] for user_id in contest.user_ids
                 if user_id in users_by_id]
        problems = [problems_by_id[problem_id]
                    for problem_id in contest.problem_ids
                    if problem_id in problems_by_id]

    for problem in problems:
        if problem.type_ == PROBLEM_TYPE_DYNAMIC_RANKING \
                and problem.misc.dynamic_ranking_ratio is None:
            raise ValidationError(
                ERR_INVALID_ARGUMENT,
                "Dynamic ranking ratio of problem %d not found." % problem.id)

    user_ids = set(user.id for user in users)
    gathered = defaultdict(list)
    for job in jobs:
        if job.state != JOB_STATE_FINISHED \
                or job.submission.contest_id not in (scope_id, NO_CONTEST_ID) \
                or job.submission.user_id not in user_ids:
            continue
        gathered[job.submission.user_id, job.submission.problem_id] \
            .append(job)

    fastest = {}
    for problem in problems:
        if problem.type_ == PROBLEM_TYPE_DYNAMIC_RANKING:
            fastest[problem.id] = _fastest_times(problem, [
                job for user in users for job in gathered[user.id, problem.id]])

    rankings = []
    for user in users:
        scores = []
        max_time = None
        submission_count = 0
        for problem in problems:
            problem_jobs = gathered[user.id, problem.id]
            if problem.type_ == PROBLEM_TYPE_DYNAMIC_RANKING:
                scores.append(_dynamic_score(
                    problem, problem_jobs, fastest[problem.id], rule))
            else:
                job = rule.select(problem_jobs)
                scores.append(job.score if job is not None else 0.0)

            submission_count += len(problem_jobs)
            for job in problem_jobs:
                if max_time is None or job.created_time > max_time:
                    max_time = job.created_time

        if max_time is None:
            max_time = datetime.max
        rankings.append(UserRanking(user.id, user.name, scores, max_time,
                                    submission_count))

    # Higher totals first, then smaller tie breaker keys (earlier last
    # submission, fewer submissions, smaller id), then by id.
    tie_breaker = rule.tie_breaker
    if tie_breaker is None:
        rankings.sort(key=lambda r: (-r.total, r.user_id))
    else:
        rankings.sort(key=lambda r: (-r.total,
                                     _tie_breaker_key(r, tie_breaker),
                                     r.user_id))

    position = 1
    for _, group in groupby(
            rankings, key=lambda r: (r.total,
                                     _tie_breaker_key(r, tie_breaker))):
        group = list(group)
        for ranking in group:
            ranking.rank = position
        position += len(group)

    logger.debug("Ranked %d users on %d problems.",
                 len(rankings), len(problems))
    return rankings
