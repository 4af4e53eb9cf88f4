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

"""Colored output on terminals, used by the log formatters."""

import curses
import functools
import sys


class colors:
    BLACK = curses.COLOR_BLACK
    RED = curses.COLOR_RED
    GREEN = curses.COLOR_GREEN
    YELLOW = curses.COLOR_YELLOW
    BLUE = curses.COLOR_BLUE
    MAGENTA = curses.COLOR_MAGENTA
    CYAN = curses.COLOR_CYAN
    WHITE = curses.COLOR_WHITE


@functools.cache
def _terminal_has_colors(fd):
    # The terminal behind a descriptor does not change, and setupterm
    # must be called before any other terminfo query.
    try:
        curses.setupterm(fd=fd)
    except curses.error:
        return False
    # See `man terminfo` for capabilities' names and meanings.
    return curses.tigetnum("colors") > 0


def has_color_support(stream):
    """Return True only if the stream is a TTY whose terminfo entry
    declares support for colors, False if it isn't or we can't tell.

    stream (fileobj): a file-like object (that adheres to the API
        declared in the `io' package).

    """
    try:
        return stream.isatty() and _terminal_has_colors(stream.fileno())
    except OSError:
        # Streams without a descriptor, e.g. io.StringIO.
        return False


def _capability(name, *args):
    return curses.tparm(curses.tigetstr(name), *args).decode("ascii")


def add_color_to_string(string, color, stream=sys.stdout, bold=False,
                        force=False):
    """Wrap the string in the escape sequences giving it the color.

    string (str): the string to color.
    color (int): the color as a colors constant, like colors.BLACK,
        that means "no color".
    stream (fileobj): the stream the string will be written to; if it
        has no color support the string is returned unchanged.
    bold (bool): True if the string should be bold.
    force (bool): True to add the sequences regardless of stream.

    return (str): the formatted string.

    """
    if not force and not has_color_support(stream):
        return string
    prefix = ""
    if color != colors.BLACK:
        prefix += _capability("setaf", color)
    if bold:
        prefix += _capability("bold")
    return prefix + string + _capability("sgr0")
