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
Recursive descent parser of the partition definition language.

A partition file contains one statement per line::

    GTR, gene1 = 1-100
    HKY, gene2 = 101-200/3,250-300

Each statement binds a model name and a partition name to one or more
intervals of 1-based sites. An interval is a single site (``5``), a range
(``1-100``) or either of them followed by a stride (``101-200/3``), which
keeps every n-th site starting at the first site of the interval.

The :class:`Parser` consumes the tokens produced by a
:class:`~alnpart.process.scanner.Scanner` and, for every interval, calls the
``add_range`` method of a partition set builder with zero-based bounds. The
parser itself does not check whether the bounds are valid. That is left to
the builder (usually a :class:`~alnpart.process.data.PartitionSet`), whose
exceptions reach the caller unchanged.

Parsing stops at the first error. Grammar errors are raised as sub-classes
of :class:`~alnpart.process.error_handling.InvalidPartitionFile`.
"""

import os
import logging

from alnpart.process.scanner import Scanner
from alnpart.process.data import PartitionSet
from alnpart.process.tokens import IDENTIFIER, SEPARATOR, EQUAL, RANGE, \
    MODULO, DECIMAL, END_OF_LINE, END_OF_INPUT, TOKEN_NAMES
from alnpart.process.error_handling import PartitionException, \
    MissingModelName, MissingSeparator, MissingPartitionName, \
    MissingAssignment, InvalidIntervalStart, InvalidIntervalEnd, \
    InvalidIntervalModulo, MissingIntervalTerminator

logger = logging.getLogger(__name__)


class Parser(object):
    """Parser of partition definitions.

    A `Parser` is created for a single character source and can parse it
    only once.

    Parameters
    ----------
    source : str or file-like
        Partition definition text or an open stream. The stream is not
        closed by the parser.

    Attributes
    ----------
    scanner : Scanner
        Lexical scanner of `source`.
    line : int
        1-based line number of the last token read.
    """

    def __init__(self, source):

        self.scanner = Scanner(source)

        self.line = 1

        self._next_line = 1
        """
        Line of the next token returned by the scanner.
        """

        self._buf = None
        """
        Last token read, as a (tok, lit, line) tuple. Kept so that it can be
        pushed back with `_unscan`.
        """

        self._buffered = False
        """
        When True, the next call to `_scan` returns the token in `_buf`
        instead of reading from the scanner.
        """

        self._used = False

    def _scan(self):
        """Returns the next token, or the token pushed back by `_unscan`."""

        if self._buffered:
            self._buffered = False
            tok, lit, self.line = self._buf
            return tok, lit

        tok, lit = self.scanner.scan()

        self.line = self._next_line
        if tok == END_OF_LINE:
            self._next_line += 1

        self._buf = (tok, lit, self.line)
        return tok, lit

    def _unscan(self):
        """Pushes the last read token back. Capacity is a single token."""
        self._buffered = True

    def _expect(self, kind, exception, expected):
        """Reads the next token and returns its literal if it is of `kind`.

        Parameters
        ----------
        kind : int
            Required token kind.
        exception : InvalidPartitionFile
            Exception class raised when the token is of another kind.
        expected : str
            Description of what was expected, used in the error message.

        Raises
        ------
        InvalidPartitionFile
            The `exception` class, when the token does not match.
        """

        tok, lit = self._scan()

        if tok != kind:
            raise exception(lit, expected, self.line, TOKEN_NAMES[tok])

        return lit

    def parse(self, alignment_length):
        """Parses the partition definitions into a new `PartitionSet`.

        Parameters
        ----------
        alignment_length : int
            Number of sites of the alignment the partitions apply to.

        Returns
        -------
        partition_set : PartitionSet
            Partition set with every parsed interval registered.

        Raises
        ------
        InvalidPartitionFile
            When the partition definitions are badly formatted.
        PartitionRangeError
            When one of the intervals is rejected by the partition set.
        """

        partition_set = PartitionSet(alignment_length)
        return self.parse_into(partition_set)

    def parse_into(self, builder):
        """Parses the partition definitions into `builder`.

        Parameters
        ----------
        builder : object
            Any object with an ``add_range(partition_name, model_name, start,
            end, modulo)`` method. `start` and `end` are zero-based and
            inclusive. Exceptions raised by ``add_range`` are propagated
            unchanged.

        Returns
        -------
        builder : object
            The provided `builder`.
        """

        if self._used:
            raise PartitionException("A Parser can only parse its input "
                                     "once")
        self._used = True

        # The first token of the input must be a model name
        tok, lit = self._scan()
        if tok != IDENTIFIER:
            raise MissingModelName(lit, "expected a model name", self.line,
                                   TOKEN_NAMES[tok])
        self._unscan()

        while True:
            tok, lit = self._scan()

            if tok == END_OF_INPUT:
                break

            # Blank lines between statements
            if tok == END_OF_LINE:
                continue

            if tok != IDENTIFIER:
                raise MissingModelName(lit, "expected a model name",
                                       self.line, TOKEN_NAMES[tok])

            self._parse_statement(builder, lit)

        return builder

    def _parse_statement(self, builder, model_name):
        """Parses the remainder of a statement after its model name."""

        self._expect(SEPARATOR, MissingSeparator,
                     "expected ',' after model name '%s'" % model_name)

        partition_name = self._expect(
            IDENTIFIER, MissingPartitionName,
            "expected a partition name after '%s,'" % model_name)

        self._expect(EQUAL, MissingAssignment,
                     "expected '=' after partition name '%s'" %
                     partition_name)

        while True:
            start, end, modulo = self._parse_interval()

            logger.debug("Registering interval %s-%s/%s of partition %s "
                         "(%s)", start, end, modulo, partition_name,
                         model_name)

            builder.add_range(partition_name, model_name, start - 1,
                              end - 1, modulo)

            tok, lit = self._scan()

            # Another interval of the same partition
            if tok == SEPARATOR:
                continue

            if tok == END_OF_LINE:
                return

            if tok == END_OF_INPUT:
                # Left for the main loop to finish
                self._unscan()
                return

            raise MissingIntervalTerminator(
                lit, "expected separator, end of line, or end of input",
                self.line, TOKEN_NAMES[tok])

    def _parse_interval(self):
        """Parses an interval, returning its 1-based start, end and modulo.
        """

        start = int(self._expect(DECIMAL, InvalidIntervalStart,
                                 "expected a decimal number to start the "
                                 "interval"))
        end = start
        modulo = 1

        tok, lit = self._scan()

        if tok == RANGE:
            end = int(self._expect(DECIMAL, InvalidIntervalEnd,
                                   "expected the last site of the interval "
                                   "after '%s-'" % start))
            tok, lit = self._scan()

        if tok == MODULO:
            modulo = int(self._expect(DECIMAL, InvalidIntervalModulo,
                                      "expected the interval stride after "
                                      "'/'"))
        else:
            self._unscan()

        return start, end, modulo


def parse_partitions(source, alignment_length):
    """Parses partition definitions from a string or an open stream.

    Parameters
    ----------
    source : str or file-like
        Partition definition text or an open stream.
    alignment_length : int
        Number of sites of the alignment.

    Returns
    -------
    partition_set : PartitionSet
    """

    return Parser(source).parse(alignment_length)


def read_partitions(partition_file, alignment_length):
    """Parses a partition file, given its path or an open handle.

    A path is opened without newline translation, so that "\\r" and
    "\\r\\n" line ends are handled by the scanner, and the file is always
    closed before returning. An open handle belongs to the caller and is
    left open.

    Parameters
    ----------
    partition_file : str or file-like
        Path to the partition file, or an open text or binary handle.
    alignment_length : int
        Number of sites of the alignment.

    Returns
    -------
    partition_set : PartitionSet
    """

    if not isinstance(partition_file, (str, os.PathLike)):
        return Parser(partition_file).parse(alignment_length)

    with open(partition_file, newline="") as fh:
        return Parser(fh).parse(alignment_length)
