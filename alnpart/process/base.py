#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
#  Copyright 2012 Unknown <diogo@arch>
#
#  This program is free software; you can redistribute it and/or modify
#  it under the terms of the GNU General Public License as published by
#  the Free Software Foundation; either version 2 of the License, or
#  (at your option) any later version.
#
#  This program is distributed in the hope that it will be useful,
#  but WITHOUT ANY WARRANTY; without even the implied warranty of
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#  GNU General Public License for more details.
#
#  You should have received a copy of the GNU General Public License
#  along with this program; if not, write to the Free Software
#  Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston,
#  MA 02110-1301, USA.

"""
The `base` module provides several functions of general use for the
`process` modules and the PartSeq CLI program: terminal logging with
:func:`print_col`, the :class:`CleanUp` decorator that wraps the main
execution function of PartSeq, alignment format detection and range
merging.
"""

import sys
import time
import traceback

from alnpart.process.error_handling import InputError


class CleanUp(object):
    """Decorator class that wraps the main execution function of PartSeq.

    It clocks the duration of the execution and handles keyboard
    interruptions and unexpected exceptions, so that the program always
    ends with an informative message. The only requirement of `func` is that
    its first argument is the argparser namespace.

    Parameters
    ----------
    func : function
        Main function of PartSeq

    Attributes
    ----------
    func : function
        Main function of PartSeq

    See Also
    --------
    print_col
    """

    def __init__(self, func):
        self.func = func

    def __call__(self, *args):
        """Wraps the call of `func`.

        Parameters
        ----------
        args : list
            Arbitrary list of positional arguments of `func`. The only
            requirement is that the first element is the argparse namespace
            object.
        """

        try:
            # Set starting time for clocking execution duration
            start_time = time.time()

            res = self.func(*args)

            # If program was not executed with 'quiet' flag, print final
            # execution message
            if not args[0].quiet:
                print_col("Program execution successfully completed in %s "
                          "seconds" %
                          (round(time.time() - start_time, 2)), GREEN)

            return res

        except KeyboardInterrupt:
            print_col("Interrupting, by your command", RED)

        except Exception:
            traceback.print_exc()
            print_col("Program exited with errors!", RED)


def merger(ranges):
    """Generator that merges continuous ranges of tuples in a list.

    Parameters
    ----------
    ranges : list
        List of tuples, each with two integer elements defining a range,
        (0, 100) for instance, sorted by their start.

    Example
    -------
    If the provide ranges are [(1, 234), (235, 456), (560, 607), (608,789)]
    this generator will yield the elements (1, 456) and (560, 789)
    """

    last_start = previous = None

    for st, en in ranges:
        if previous is None:
            last_start = st
            previous = en
        elif st - 1 == previous:
            previous = en
        else:
            yield last_start, previous
            previous = en
            last_start = st

    if previous is not None:
        yield last_start, previous


def autofinder(reference_file):
    """Autodetects the format of an alignment file.

    Only the first non-empty line of `reference_file` is read. Lines starting
    with ">" mean a FASTA file and a header with the number of taxa and
    sites mean a PHYLIP file.

    Parameters
    ----------
    reference_file : str
        Path to sequence file

    Returns
    -------
    fmt : str
        File format of `reference_file`: "fasta" or "phylip".

    Raises
    ------
    InputError
        When the format could not be recognized.
    """

    with open(reference_file) as file_handle:

        # If input file is not a simple text file, which means it's invalid,
        # handle this exception
        try:
            header = file_handle.readline()
            # Skips first empty lines, if any
            while header and header.strip() == "":
                header = file_handle.readline()
        except UnicodeDecodeError:
            raise InputError("Invalid input file: %s" % reference_file)

    if header.strip().startswith(">"):
        return "fasta"

    fields = header.split()
    if len(fields) == 2 and all(x.isdigit() for x in fields):
        return "phylip"

    raise InputError("Could not recognize the format of the input file: "
                     "%s" % reference_file)


def has_colours(stream):
    if not hasattr(stream, "isatty"):
        return False
    if not stream.isatty():
        return False  # auto color only on TTYs
    try:
        import curses
        curses.setupterm()
        return curses.tigetnum("colors") > 2
    except Exception:
        # guess false in case of error
        return False

# Support for terminal colors
BLACK, RED, GREEN, YELLOW, BLUE, MAGENTA, CYAN, WHITE = range(8)
has_colours = has_colours(sys.stdout)


def print_col(text, color, quiet=False):
    """Custom print function for terminal updates of PartSeq.

    The colors in use are green for normal logging, yellow for warnings and
    red for errors. The final formatting of the message is something like:

    [PartSeq[-Error/Warning]] <message>

    Parameters
    ----------
    text : str
        The message that will appear in the terminal
    color : variable reference
        Reference to the terminal colors defined in process.base. The options
        are: {GREEN, YELLOW, RED}
    quiet : bool
        Determines whether the message is logged. If True, no messages are
        printed to the terminal. Errors are always printed.

    Raises
    ------
    SystemExit
        When `color` is RED.
    """

    if not quiet or color == RED:
        suf = {GREEN: "[PartSeq] ", YELLOW: "[PartSeq-Warning] ",
               RED: "[PartSeq-Error] "}
        stream = sys.stderr if color == RED else sys.stdout
        if has_colours:
            seq = "\x1b[1;%dm" % (30 + color) + suf[color] + "\x1b[0m" + text
        else:
            seq = suf[color] + text
        print(seq, file=stream)

    if color == RED:
        raise SystemExit(1)
