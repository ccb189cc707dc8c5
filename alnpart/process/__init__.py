"""
Introduction to AlnPart's process module
========================================

The `process` subpackage is the main backend of the PartSeq CLI program.

What it does
------------

The `process` module contains the classes and functions responsible for
parsing partition definition files, storing the resulting partitions and
applying them to alignment data.

Submodules description
----------------------

:mod:`~alnpart.process.tokens`
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Token kinds and character classes of the partition language.

:mod:`~alnpart.process.scanner`
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Contains the :class:`~alnpart.process.scanner.Scanner` class, the lexer of
the partition language.

:mod:`~alnpart.process.parser`
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Contains the :class:`~alnpart.process.parser.Parser` class and the
:func:`~alnpart.process.parser.read_partitions` function.

:mod:`~alnpart.process.data`
~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Contains the :class:`~alnpart.process.data.PartitionSet` class, which
accumulates the intervals registered by the parser.

:mod:`~alnpart.process.sequence`
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Contains the :class:`~alnpart.process.sequence.Alignment` class, used to
read, split and write alignments.

:mod:`~alnpart.process.base`
~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Terminal logging and other functions of general use for the CLI program.

:mod:`~alnpart.process.error_handling`
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Contains custom made Exception sub-classes.
"""
