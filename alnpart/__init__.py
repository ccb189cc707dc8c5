"""
Welcome to the AlnPart API reference guide. This reference guide details
the sub-packages and modules used for each component of AlnPart.

What is AlnPart
===============

AlnPart is a small command line application and library that reads
partition definition files, similar to the ones used by RAxML, and applies
them to multiple sequence alignments. A partition file groups the sites of
an alignment into named partitions, each bound to a substitution model::

    GTR, gene1 = 1-100
    HKY, gene2 = 101-200/3,250-300

Components of AlnPart
=====================

Process backend
---------------

The partition language is handled by three modules of the
:mod:`alnpart.process` sub package:

  - :mod:`alnpart.process.tokens`: The token kinds and character classes
    of the partition language.

  - :mod:`alnpart.process.scanner`: The :class:`~alnpart.process.scanner.
    Scanner` class, which converts a character stream into tokens.

  - :mod:`alnpart.process.parser`: The :class:`~alnpart.process.parser.
    Parser` class, which consumes the tokens and registers every parsed
    interval in a partition set.

Parsed partitions are stored in the :class:`~alnpart.process.data.
PartitionSet` class and can be applied to an :class:`~alnpart.process.
sequence.Alignment` object to split it into one alignment per partition.

Command line
------------

The PartSeq CLI program is defined in :mod:`alnpart.PartSeq`, with its
argument checks in :mod:`alnpart.base.sanity`.
"""

__version__ = "0.2.1"
__build__ = "191026"
__author__ = "Diogo N. Silva"
__copyright__ = "Diogo N. Silva"
__credits__ = ["Diogo N. Silva"]
__license__ = "GPL3"
__maintainer__ = "Diogo N. Silva"
__email__ = "o.diogosilva@gmail.com"
__status__ = "4 - Beta"
