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

"""Logging setup shared by every OJ component.

Importing this module installs a handler printing INFO messages on
stdout; long running processes call initialize_logging() to also log
to a file.

Records may carry two extra fields, shown between brackets before the
message: "component", the process that logged (set by
initialize_logging), and "operation", what the code was doing (set by
OperationAdapter, e.g. "job 42").

"""

import logging
import os
import sys
import time

import gevent.lock

from ojcommon.terminal import colors, add_color_to_string, has_color_support


class GeventLockMixin:
    """Make a handler block only the current greenlet on its lock."""

    def createLock(self):
        self.lock = gevent.lock.RLock()


class StreamHandler(GeventLockMixin, logging.StreamHandler):
    pass


class FileHandler(GeventLockMixin, logging.FileHandler):
    pass


_HASH_COLORS = [colors.BLACK, colors.RED, colors.GREEN, colors.YELLOW,
                colors.BLUE, colors.MAGENTA, colors.CYAN, colors.WHITE]


def get_color_hash(string):
    """Return a color (colors.*) that depends only on the string."""
    return _HASH_COLORS[sum(string.encode("utf-8")) % len(_HASH_COLORS)]


class CustomFormatter(logging.Formatter):
    """Format records as "<time> - <LEVEL> [<component>] [<operation>]
    <message>", omitting the bracketed fields that are not known.

    """
    LEVEL_COLORS = {logging.CRITICAL: colors.RED,
                    logging.ERROR: colors.RED,
                    logging.WARNING: colors.YELLOW,
                    logging.INFO: colors.GREEN,
                    logging.DEBUG: colors.CYAN}

    def __init__(self, colors=False):
        """colors (bool): whether to add terminal color sequences."""
        super().__init__()
        self.colors = colors

    def formatMessage(self, record):
        head = "%s - %s" % (record.asctime, record.levelname)
        if self.colors:
            head = add_color_to_string(
                head, self.LEVEL_COLORS.get(record.levelno, colors.BLACK),
                bold=True, force=True)
        parts = [head]
        for tag in (self.get_coordinates(record),
                    self.get_operation(record)):
            tag = tag.strip()
            if tag == "":
                continue
            if self.colors:
                tag = add_color_to_string(tag, get_color_hash(tag),
                                          bold=True, force=True)
            parts.append("[%s]" % tag)
        parts.append(record.message)
        return " ".join(parts)

    def usesTime(self):
        return True

    def get_coordinates(self, record):
        return getattr(record, "component", "")

    def get_operation(self, record):
        return getattr(record, "operation", "")


class DetailedFormatter(CustomFormatter):
    """Also show the greenlet, the file and the function that logged."""

    def get_coordinates(self, record):
        greenlet = record.threadName.replace("Thread", "") \
            .replace("Dummy-", "")
        location = "%s::%s" % (os.path.splitext(record.filename)[0],
                               record.funcName)
        return " ".join(part for part in (
            super().get_coordinates(record), greenlet, location) if part)


class ComponentFilter(logging.Filter):
    """Set the "component" field of records that have none; never
    drops a record.

    """
    def __init__(self, component):
        super().__init__()
        self.component = component

    def filter(self, record):
        if not hasattr(record, "component"):
            record.component = self.component
        return True


class OperationAdapter(logging.LoggerAdapter):
    """Log through logger with the given operation attached to every
    record, unless the call passes its own in extra.

    """
    def __init__(self, logger, operation):
        super().__init__(logger, {"operation": operation})
        self.operation = operation

    def process(self, msg, kwargs):
        extra = dict(kwargs.get("extra") or {})
        extra.setdefault("operation", self.operation)
        kwargs["extra"] = extra
        return msg, kwargs


root_logger = logging.getLogger()
root_logger.setLevel(logging.DEBUG)

shell_handler = StreamHandler(sys.stdout)
shell_handler.setLevel(logging.INFO)
shell_handler.setFormatter(CustomFormatter(has_color_support(sys.stdout)))
root_logger.addHandler(shell_handler)


def set_detailed_logs(detailed):
    """Switch the shell handler between the short and the detailed
    format.

    """
    formatter_class = DetailedFormatter if detailed else CustomFormatter
    shell_handler.setFormatter(
        formatter_class(has_color_support(sys.stdout)))


def initialize_logging(component, log_dir, debug=False):
    """Attach the component name to the logs and log to a file too.

    The file is <log_dir>/<component>/<timestamp>.log, and
    <log_dir>/<component>/last.log links to the newest one.

    component (str): name shown in every message, e.g. "JudgeService".
    log_dir (str): base directory for the log files.
    debug (bool): whether the file log includes DEBUG messages.

    return (str): the path of the new log file.

    """
    component_filter = ComponentFilter(component)
    shell_handler.addFilter(component_filter)

    component_dir = os.path.join(log_dir, component)
    os.makedirs(component_dir, exist_ok=True)
    log_filename = "%d.log" % int(time.time())
    log_path = os.path.join(component_dir, log_filename)

    file_handler = FileHandler(log_path, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG if debug else logging.INFO)
    file_handler.setFormatter(CustomFormatter(False))
    file_handler.addFilter(component_filter)
    root_logger.addHandler(file_handler)

    last_log = os.path.join(component_dir, "last.log")
    if os.path.lexists(last_log):
        os.remove(last_log)
    os.symlink(log_filename, last_log)

    return log_path
