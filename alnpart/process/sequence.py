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
The `sequence` module contains the :class:`Alignment` class, a minimal
alignment container used to apply partitions to alignment data.

Input formats are detected automatically with
:func:`~alnpart.process.base.autofinder`. Each format has its own parsing
method, using the `_read_<format>` notation, and its own writing method,
using the `_write_<format>` notation::

    parsing_methods = {
        "fasta": self._read_fasta,
        "phylip": self._read_phylip
    }

Once loaded, an alignment can be split into one :class:`Alignment` per
partition of a :class:`~alnpart.process.data.PartitionSet` with
:meth:`Alignment.split`.
"""

import os
from collections import OrderedDict

import numpy as np

from alnpart.process.base import autofinder
from alnpart.process.error_handling import InputError, EmptyAlignment


class Alignment(object):
    """Sequence alignment with its taxa in input order.

    Parameters
    ----------
    input_alignment : str, optional
        Path to the alignment file. When not provided, the alignment is
        built from `sequences`.
    sequences : OrderedDict, optional
        Taxon names (keys) and their sequences (values).
    name : str, optional
        Name of the alignment. Defaults to the base name of
        `input_alignment`.

    Attributes
    ----------
    name : str
        Name of the alignment.
    path : str
        Path to the alignment file, if any.
    input_format : str
        Format of the input file ("fasta" or "phylip"), if any.
    sequences : OrderedDict
        Taxon names (keys) and their sequences (values).
    locus_length : int
        Number of sites of the alignment.
    """

    format_ext = {"fasta": ".fas",
                  "phylip": ".phy"}
    """Dictionary that stores the suffix for each output format"""

    def __init__(self, input_alignment=None, sequences=None, name=None):

        self.path = input_alignment
        self.input_format = None
        self.sequences = OrderedDict()

        if input_alignment:
            self.name = name or os.path.basename(input_alignment)
            self.read_alignment()
        else:
            self.name = name
            if sequences:
                self.sequences = OrderedDict(sequences)

        self.locus_length = self._check_length()

    def __len__(self):
        return len(self.sequences)

    def __iter__(self):
        return iter(self.sequences.items())

    @property
    def taxa_names(self):
        return list(self.sequences)

    def read_alignment(self):
        """Reads the alignment file in `path`, detecting its format."""

        self.input_format = autofinder(self.path)

        parsing_methods = {
            "fasta": self._read_fasta,
            "phylip": self._read_phylip
        }

        # Call the appropriate method
        with open(self.path) as fh:
            parsing_methods[self.input_format](fh)

        if not any(self.sequences.values()):
            raise EmptyAlignment("Alignment %s is empty" % self.path)

    def _read_fasta(self, fh):

        taxon = None

        for line in fh:
            line = line.strip()

            if not line:
                continue

            if line.startswith(">"):
                taxon = line[1:].strip()
                if taxon in self.sequences:
                    raise InputError("Duplicate taxon %s in %s" %
                                     (taxon, self.path))
                self.sequences[taxon] = []
            elif taxon is None:
                raise InputError("Sequence data before the first header in "
                                 "%s" % self.path)
            else:
                self.sequences[taxon].append(line.replace(" ", ""))

        for taxon, seq in self.sequences.items():
            self.sequences[taxon] = "".join(seq)

    def _read_phylip(self, fh):

        header = fh.readline()
        while header.strip() == "":
            header = fh.readline()

        ntaxa, nsites = [int(x) for x in header.split()]

        for line in fh:
            if line.strip() == "":
                continue

            fields = line.split()
            taxon, seq = fields[0], "".join(fields[1:])
            self.sequences[taxon] = seq

        if len(self.sequences) != ntaxa:
            raise InputError("Expected %s taxa but found %s in %s" %
                             (ntaxa, len(self.sequences), self.path))

        if any(len(x) != nsites for x in self.sequences.values()):
            raise InputError("Sequence length does not match the header of "
                             "%s" % self.path)

    def _check_length(self):
        """Returns the length of the sequences, which must be equal for all
        taxa."""

        lengths = set(len(x) for x in self.sequences.values())

        if len(lengths) > 1:
            raise InputError("Sequences of alignment %s have different "
                             "lengths" % self.name)

        return lengths.pop() if lengths else 0

    def matrix(self):
        """Returns the alignment as a numpy character matrix, with one row
        per taxon and one column per site."""

        if not self.sequences:
            return np.empty((0, 0), dtype="<U1")

        return np.array([list(x) for x in self.sequences.values()],
                        dtype="<U1")

    def split(self, partition_set):
        """Splits the alignment according to a partition set.

        Parameters
        ----------
        partition_set : PartitionSet
            Partitions of the alignment. Its length must be equal to
            `locus_length`.

        Returns
        -------
        split_alns : OrderedDict
            Partition names (keys) and the `Alignment` object with the sites
            of each partition, in their original order (values).

        Raises
        ------
        InputError
            When the length of `partition_set` and of the alignment differ.
        """

        if partition_set.ali_length() != self.locus_length:
            raise InputError("The partitions were defined for %s sites but "
                             "the alignment has %s" %
                             (partition_set.ali_length(), self.locus_length))

        data = self.matrix()
        split_alns = OrderedDict()

        for code in range(partition_set.n_partitions()):

            name = partition_set.partition_name(code)
            sites = partition_set.sites(code)

            part_seqs = OrderedDict(
                (taxon, "".join(data[i, sites]))
                for i, taxon in enumerate(self.sequences))

            split_alns[name] = Alignment(sequences=part_seqs, name=name)

        return split_alns

    def write_to_file(self, output_format, output_file):
        """Writes the alignment to a file.

        Parameters
        ----------
        output_format : str
            "fasta" or "phylip".
        output_file : str
            Path of the output file, without extension. The extension is
            taken from `format_ext`.

        Returns
        -------
        path : str
            Path of the written file.
        """

        write_methods = {
            "fasta": self._write_fasta,
            "phylip": self._write_phylip
        }

        try:
            method = write_methods[output_format]
        except KeyError:
            raise InputError("Unknown output format: %s" % output_format)

        path = output_file + self.format_ext[output_format]

        with open(path, "w") as fh:
            method(fh)

        return path

    def _write_fasta(self, fh):

        for taxon, seq in self.sequences.items():
            fh.write(">%s\n%s\n" % (taxon, seq))

    def _write_phylip(self, fh):

        # Pad taxon names to the longest one
        pad = max(len(x) for x in self.sequences) + 3 if self.sequences \
            else 0

        fh.write("%s %s\n" % (len(self.sequences), self.locus_length))
        for taxon, seq in self.sequences.items():
            fh.write("%s %s\n" % (taxon.ljust(pad), seq))
