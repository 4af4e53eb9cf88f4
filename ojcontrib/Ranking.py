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

"""This script prints the standings of a contest, or the global ones,
as JSON.

"""

import argparse
import json
import logging
import sys

from ojcommon.constants import NO_CONTEST_ID
from ojranking import RankingRule
from ojranking.ranking import SCORING_RULES, TIE_BREAKERS
from oj.service import ValidationError
from oj.service.JudgeService import JudgeService


logger = logging.getLogger(__name__)


def print_ranking(contest_id, scoring_rule=None, tie_breaker=None):
    try:
        rule = RankingRule(scoring_rule, tie_breaker)
        rankings = JudgeService().get_ranking(contest_id, rule)
    except ValidationError as error:
        logger.error("Cannot compute the standings: %s", error.message)
        return False

    print(json.dumps([ranking.export_to_dict() for ranking in rankings],
                     indent=2))
    return True


def main():
    """Parse arguments and launch process.

    """
    parser = argparse.ArgumentParser(description="Print the standings.")
    parser.add_argument("contest_id", action="store", type=int, nargs="?",
                        default=NO_CONTEST_ID,
                        help="id of the contest (global standings if "
                             "omitted)")
    parser.add_argument("-s", "--scoring-rule", action="store",
                        choices=SCORING_RULES,
                        help="which job of a user counts for a problem")
    parser.add_argument("-t", "--tie-breaker", action="store",
                        choices=TIE_BREAKERS,
                        help="how to order users with the same score")

    args = parser.parse_args()

    success = print_ranking(args.contest_id, args.scoring_rule,
                            args.tie_breaker)
    return 0 if success is True else 1


if __name__ == "__main__":
    sys.exit(main())
