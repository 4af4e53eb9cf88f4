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

import dataclasses
import logging
import os
import sys
from dataclasses import dataclass

from oj.log import set_detailed_logs
from ojcommon import conf_parser
from ojcommon.conf_parser import ConfigError
from ojcommon.constants import PROBLEM_TYPE_STANDARD, PROBLEM_TYPE_STRICT, \
    PROBLEM_TYPE_SPJ, PROBLEM_TYPE_DYNAMIC_RANKING


logger = logging.getLogger(__name__)


PROBLEM_TYPES = [PROBLEM_TYPE_STANDARD, PROBLEM_TYPE_STRICT,
                 PROBLEM_TYPE_SPJ, PROBLEM_TYPE_DYNAMIC_RANKING]


def default_path(name):
    return os.path.join(sys.prefix, name)


@dataclass()
class GlobalConfig:
    temp_dir: str = "/tmp"
    keep_sandbox: bool = False
    file_log_debug: bool = False
    stream_log_detailed: bool = False
    log_dir: str = default_path("log")


@dataclass()
class DatabaseConfig:
    url: str = "sqlite:///" + default_path("lib/oj.db")
    debug: bool = False


@dataclass()
class JudgeConfig:
    # Number of submissions judged at the same time.
    workers: int = 4


@dataclass()
class CaseConfig:
    score: float
    input_file: str
    answer_file: str
    # In microseconds, 0 means no limit.
    time_limit: int = 0
    # Not enforced.
    memory_limit: int = 0

    def __post_init__(self):
        if self.time_limit < 0:
            raise ConfigError("Time limit of a case must be non-negative, "
                              "is %d" % self.time_limit)


@dataclass()
class MiscConfig:
    # Command of the external verifier, with %ANSWER% and %OUTPUT%
    # placeholders.
    special_judge: list[str] | None = None
    # Share of the score of a dynamic ranking problem that depends on
    # the running time.
    dynamic_ranking_ratio: float | None = None


@dataclass()
class ProblemConfig:
    id: int
    name: str
    type_: str
    cases: list[CaseConfig] = dataclasses.field(default_factory=list)
    misc: MiscConfig = dataclasses.field(default_factory=MiscConfig)

    def __post_init__(self):
        if self.type_ not in PROBLEM_TYPES:
            raise ConfigError("Unknown type %r for problem %d"
                              % (self.type_, self.id))
        ratio = self.misc.dynamic_ranking_ratio
        if ratio is not None and not 0.0 <= ratio <= 1.0:
            raise ConfigError("Dynamic ranking ratio of problem %d must be "
                              "between 0 and 1" % self.id)


@dataclass()
class LanguageConfig:
    name: str
    # Name of the source file in the sandbox, e.g. main.cpp.
    file_name: str
    # Compilation command, with %INPUT% and %OUTPUT% placeholders.
    command: list[str]

    def __post_init__(self):
        if len(self.command) == 0:
            raise ConfigError("Empty command for language %r" % self.name)


field_helper = lambda T: dataclasses.field(default_factory=T)


@dataclass(kw_only=True)
class Config:
    global_: GlobalConfig = field_helper(GlobalConfig)
    database: DatabaseConfig = field_helper(DatabaseConfig)
    judge: JudgeConfig = field_helper(JudgeConfig)
    problems: list[ProblemConfig] = field_helper(list)
    languages: list[LanguageConfig] = field_helper(list)

    def __post_init__(self):
        problem_ids = [problem.id for problem in self.problems]
        if len(set(problem_ids)) != len(problem_ids):
            raise ConfigError("Conflicting problem ids")
        language_names = [language.name for language in self.languages]
        if len(set(language_names)) != len(language_names):
            raise ConfigError("Conflicting language names")

        # If the configuration says to print detailed log on stdout,
        # change the log configuration.
        set_detailed_logs(self.global_.stream_log_detailed)

    def get_problem(self, problem_id: int) -> ProblemConfig | None:
        for problem in self.problems:
            if problem.id == problem_id:
                return problem
        return None

    def get_language(self, name: str) -> LanguageConfig | None:
        for language in self.languages:
            if language.name == name:
                return language
        return None


def make_config() -> Config:
    # Default config file path can be overridden using environment
    # variable 'OJ_CONFIG'.
    config_file = os.environ.get("OJ_CONFIG", default_path("etc/oj.toml"))

    try:
        return conf_parser.load_config_file(config_file, Config)
    except FileNotFoundError:
        logger.warning("Cannot find configuration file %s, using defaults.",
                       config_file)
        return Config()
    except ConfigError as e:
        # Don't show stacktrace for basic errors.
        logger.critical("Cannot load configuration file %s: %s",
                        config_file, e)
        sys.exit(1)


config = make_config()
