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
Custom exceptions raised while reading partition files, registering
partition ranges and handling alignment input.

All partition related exceptions inherit from `PartitionException`.
Grammar errors found by the parser inherit from `InvalidPartitionFile`
and record the offending literal, what was expected in its place and the
line of the partition file where they occurred. Validation errors raised
by :class:`~alnpart.process.data.PartitionSet` inherit from
`PartitionRangeError`.
"""


class PartitionException(Exception):
    def __init__(self, value):
        super(PartitionException, self).__init__(value)
        self.message = value

    def __str__(self):
        return str(self.message)


class InvalidPartitionFile(PartitionException):
    """Base class of the structural errors of a partition file.

    Parameters
    ----------
    literal : str
        Literal of the token found where another was expected. Empty for
        line ends and for the end of the input.
    expected : str
        Description of what the grammar required at that point.
    line : int
        1-based line number of the partition file.
    found : str
        Name of the token kind that was found.
    """

    description = "Badly formatted partition file"

    def __init__(self, literal, expected, line=None, found=None):

        self.literal = literal
        self.expected = expected
        self.line = line
        self.found = found

        shown = "'%s'" % literal if literal else (found or "nothing")

        msg = "%s: %s, found %s" % (self.description, expected, shown)
        if line is not None:
            msg += " (line %s)" % line

        super(InvalidPartitionFile, self).__init__(msg)


class MissingModelName(InvalidPartitionFile):
    description = "Partition definition must start with a model name"


class MissingSeparator(InvalidPartitionFile):
    description = "Model name must be followed by a separator"


class MissingPartitionName(InvalidPartitionFile):
    description = "Model name and separator must be followed by the " \
                  "partition name"


class MissingAssignment(InvalidPartitionFile):
    description = "Partition name must be followed by '='"


class InvalidIntervalStart(InvalidPartitionFile):
    description = "Interval definition must start with a decimal number"


class InvalidIntervalEnd(InvalidPartitionFile):
    description = "Interval '-' must be followed by a decimal number"


class InvalidIntervalModulo(InvalidPartitionFile):
    description = "Interval '/' must be followed by a decimal number"


class MissingIntervalTerminator(InvalidPartitionFile):
    description = "Interval definition must be followed by a separator, " \
                  "end of line or end of input"


class PartitionRangeError(PartitionException):
    pass


class PartitionOutOfBounds(PartitionRangeError):
    pass


class InvalidModulo(PartitionRangeError):
    pass


class InvalidRange(PartitionRangeError):
    pass


class OverlappingPartitions(PartitionRangeError):
    pass


class IncompleteCoverage(PartitionRangeError):
    pass


class InputError(Exception):
    def __init__(self, value):
        super(InputError, self).__init__(value)
        self.message = value

    def __str__(self):
        return str(self.message)


class EmptyAlignment(Exception):
    def __init__(self, value):
        super(EmptyAlignment, self).__init__(value)
        self.message = value

    def __str__(self):
        return str(self.message)
