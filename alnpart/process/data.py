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
The `data` module contains the :class:`PartitionSet` class, which stores the
partitions of a single alignment of known length.

Each site of the alignment is assigned to at most one partition. Sites are
added to partitions in intervals with :meth:`PartitionSet.add_range`, which
is the method called by the :class:`~alnpart.process.parser.Parser` for
every interval it parses.
"""

import logging
from collections import OrderedDict

import numpy as np
import pandas as pd

from alnpart.process.base import merger
from alnpart.process.error_handling import PartitionOutOfBounds, \
    InvalidModulo, InvalidRange, OverlappingPartitions, IncompleteCoverage

logger = logging.getLogger(__name__)

UNASSIGNED = -1


class PartitionSet(object):
    """Partitions of an alignment and their substitution models.

    Partitions are identified by an integer code, which is the order in
    which their names were first registered.

    Parameters
    ----------
    alignment_length : int
        Number of sites of the alignment.

    Attributes
    ----------
    names : list
        Name of each partition, indexed by partition code.
    models : list
        Model name of each partition, indexed by partition code.
    site_partitions : numpy.ndarray
        Partition code of each site, or -1 for sites not assigned to any
        partition.
    length : int
        Number of sites of the alignment.
    """

    def __init__(self, alignment_length):

        self.length = alignment_length

        self.names = []

        self.models = []

        self.site_partitions = np.full(alignment_length, UNASSIGNED,
                                       dtype=np.int64)

    def __len__(self):
        return len(self.names)

    def __iter__(self):
        """Iterates over the partitions.

        Yields
        ------
        name : str
            Partition name.
        model : str
            Model name.
        ranges : list
            Contiguous ranges of zero-based sites, as (start, end) tuples
            with inclusive ends.
        """

        for code, name in enumerate(self.names):
            yield name, self.models[code], self.ranges(code)

    def add_range(self, partition_name, model_name, start, end, modulo):
        """Assigns an interval of sites to a partition.

        The interval is validated before any site is assigned, so a failing
        call leaves the partition set unchanged.

        Parameters
        ----------
        partition_name : str
            Name of the partition. A new partition is created the first time
            a name is seen.
        model_name : str
            Model of the partition. Only the model given when the partition
            is created is stored.
        start : int
            Zero-based first site of the interval.
        end : int
            Zero-based last site of the interval (inclusive).
        modulo : int
            Stride. Every `modulo`-th site from `start` to `end` is assigned.

        Raises
        ------
        PartitionOutOfBounds
            When the interval is outside the alignment.
        InvalidModulo
            When `modulo` is not a positive integer.
        InvalidRange
            When `start` is greater than `end`.
        OverlappingPartitions
            When a site of the interval already belongs to a partition.
        """

        if start < 0:
            raise PartitionOutOfBounds(
                "Start of partition is outside of alignment: %s" % start)

        if end >= self.length:
            raise PartitionOutOfBounds(
                "End of partition is outside of alignment: %s" % end)

        if modulo <= 0:
            raise InvalidModulo(
                "'modulo' value is not authorized: %s" % modulo)

        if start > end:
            raise InvalidRange(
                "Start of partition is greater than its end: %s-%s" %
                (start, end))

        sites = np.arange(start, end + 1, modulo)

        taken = sites[self.site_partitions[sites] != UNASSIGNED]
        if taken.size:
            raise OverlappingPartitions(
                "Several partitions are defined for site %s" % taken[0])

        try:
            code = self.names.index(partition_name)
            if self.models[code] != model_name:
                logger.warning("Partition %s was defined with model %s. "
                               "Ignoring model %s", partition_name,
                               self.models[code], model_name)
        except ValueError:
            self.names.append(partition_name)
            self.models.append(model_name)
            code = len(self.names) - 1

        self.site_partitions[sites] = code

    def check_sites(self):
        """Checks that every site of the alignment belongs to a partition.

        Raises
        ------
        IncompleteCoverage
            With the first site (zero-based) that has no partition.
        """

        missing = np.flatnonzero(self.site_partitions == UNASSIGNED)
        if missing.size:
            raise IncompleteCoverage(
                "Not all sites are in a partition (%s)" % missing[0])

    def n_partitions(self):
        return len(self.names)

    def ali_length(self):
        return self.length

    def partition(self, position):
        """Returns the partition code of the site at `position`, or -1 when
        the position is outside the alignment or unassigned.
        """

        if position < 0 or position >= self.length:
            return UNASSIGNED

        return int(self.site_partitions[position])

    def partition_name(self, code):
        """Returns the name of the partition `code`, or an empty string if
        there is no such partition."""

        if code < 0 or code >= len(self.names):
            return ""

        return self.names[code]

    def model_name(self, code):
        """Returns the model of the partition `code`, or an empty string if
        there is no such partition."""

        if code < 0 or code >= len(self.models):
            return ""

        return self.models[code]

    def sites(self, code):
        """Returns the zero-based sites of partition `code` in increasing
        order, as a numpy array."""

        return np.flatnonzero(self.site_partitions == code)

    def ranges(self, code):
        """Returns the contiguous ranges of zero-based sites of partition
        `code` as a list of (start, end) tuples.
        """

        sites = self.sites(code)

        if not sites.size:
            return []

        return list(merger([(int(x), int(x)) for x in sites]))

    def __str__(self):
        """Partition definitions in RAxML like format, with 1-based
        contiguous ranges.
        """

        lines = []

        for name, model, ranges in self:
            intervals = []
            for st, en in ranges:
                if st == en:
                    intervals.append("%s" % (st + 1))
                else:
                    intervals.append("%s-%s" % (st + 1, en + 1))

            lines.append("%s,%s=%s\n" % (model, name, ",".join(intervals)))

        return "".join(lines)

    def summary_table(self):
        """Returns a table with a summary of each partition.

        Returns
        -------
        table : pandas.DataFrame
            One row per partition, indexed by partition name, with the
            columns "model", "nsites", "first" and "last". Sites are 1-based.
        """

        columns = ["model", "nsites", "first", "last"]
        rows = OrderedDict()

        for code, name in enumerate(self.names):
            sites = self.sites(code)
            rows[name] = [self.models[code], int(sites.size),
                          int(sites[0]) + 1 if sites.size else 0,
                          int(sites[-1]) + 1 if sites.size else 0]

        table = pd.DataFrame(list(rows.values()), index=list(rows.keys()),
                             columns=columns)
        table.index.name = "partition"

        return table

    def write_to_file(self, output_format, output_file):
        """Writes the partitions to a file.

        Parameters
        ----------
        output_format : str
            "raxml" for a RAxML like partition file, or "nexus" for a Nexus
            sets block with one charset per partition.
        output_file : str
            Path of the output file.
        """

        if output_format == "raxml":
            with open(output_file, "w") as fh:
                fh.write(str(self))

        elif output_format == "nexus":
            with open(output_file, "w") as fh:
                fh.write("#NEXUS\n\nbegin sets;\n")
                for name, _, ranges in self:
                    fh.write("\tcharset %s = %s;\n" % (
                        name, " ".join(
                            "%s" % (st + 1) if st == en else
                            "%s-%s" % (st + 1, en + 1)
                            for st, en in ranges)))
                fh.write("end;\n")

        else:
            raise ValueError("Unknown partition format: %s" % output_format)
