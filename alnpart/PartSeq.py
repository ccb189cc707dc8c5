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

import sys
import time
import argparse
import configparser

from alnpart.process.base import print_col, RED, GREEN, CleanUp
from alnpart.process.sequence import Alignment
from alnpart.process.parser import read_partitions
from alnpart.process.error_handling import PartitionException, \
    InputError, EmptyAlignment
from alnpart.base.sanity import partseq_arg_check

config_template = "partseq_template.ini"

default_settings = {"out_prefix": "",
                    "output_format": "fasta",
                    "check_sites": True,
                    "summary": False}


def generate_cfg_template(output_file=config_template):

    with open(output_file, "w") as template_fh:
        template_fh.write("""
# Configuration template file for PartSeq that can be passed using the -cfg
# option. Options given in the command line take precedence over the ones
# set here.

[Split]
# Prefix of the output alignment files, one per partition
out_prefix:
# Options available: fasta phylip
output_format: fasta
# Require every alignment site to belong to a partition (yes/no)
check_sites: yes
# Write a csv table with a summary of the partitions (yes/no)
summary: no
""")

    return output_file


def get_settings(arg):
    """Merges the defaults, the configuration file and the command line.

    Parameters
    ----------
    arg : argparse.Namespace
        Parsed arguments of PartSeq.

    Returns
    -------
    settings : dict
        Values of "out_prefix", "output_format", "check_sites" and
        "summary".
    """

    settings = dict(default_settings)

    if arg.config_file:
        cfg = configparser.ConfigParser()
        cfg.read(arg.config_file)

        if cfg.has_section("Split"):
            section = cfg["Split"]
            settings["out_prefix"] = section.get("out_prefix",
                                                 settings["out_prefix"])
            settings["output_format"] = section.get(
                "output_format", settings["output_format"])
            settings["check_sites"] = section.getboolean(
                "check_sites", settings["check_sites"])
            settings["summary"] = section.getboolean("summary",
                                                     settings["summary"])

    # Command line options override the configuration file
    if arg.outfile is not None:
        settings["out_prefix"] = arg.outfile
    if arg.output_format is not None:
        settings["output_format"] = arg.output_format
    if arg.check_sites is not None:
        settings["check_sites"] = arg.check_sites
    if arg.summary is not None:
        settings["summary"] = arg.summary

    if settings["output_format"] not in Alignment.format_ext:
        print_col("Invalid output format in configuration file: %s" %
                  settings["output_format"], RED)

    return settings


@CleanUp
def main_parser(arg):
    """ Function with the main operations of PartSeq """

    print_col("Executing PartSeq module at %s %s" % (
        time.strftime("%d/%m/%Y"), time.strftime("%I:%M:%S")), GREEN,
              quiet=arg.quiet)

    if arg.generate_cfg:
        print_col("Generating configuration template file", GREEN,
                  quiet=arg.quiet)
        return generate_cfg_template()

    settings = get_settings(arg)

    print_col("Parsing alignment %s" % arg.infile, GREEN, quiet=arg.quiet)
    try:
        alignment = Alignment(arg.infile)
    except (InputError, EmptyAlignment) as e:
        print_col(str(e), RED)

    print_col("Reading partition file %s" % arg.partition_file, GREEN,
              quiet=arg.quiet)
    try:
        partition_set = read_partitions(arg.partition_file,
                                        alignment.locus_length)
    except PartitionException as e:
        print_col(str(e), RED)

    print_col("Found %s partitions" % partition_set.n_partitions(), GREEN,
              quiet=arg.quiet)

    # Only convert the partition file
    if arg.convert:
        print_col("Writing partition file in %s format" % arg.convert,
                  GREEN, quiet=arg.quiet)
        partition_set.write_to_file(arg.convert, arg.outfile)
        return partition_set

    if settings["check_sites"]:
        try:
            partition_set.check_sites()
        except PartitionException as e:
            print_col(str(e), RED)

    prefix = settings["out_prefix"]
    split_alns = alignment.split(partition_set)

    for name, aln in split_alns.items():
        aln.write_to_file(settings["output_format"], prefix + name)

    print_col("Wrote %s partition alignments" % len(split_alns), GREEN,
              quiet=arg.quiet)

    if settings["summary"]:
        summary_file = prefix + "partition_summary.csv"
        partition_set.summary_table().to_csv(summary_file)
        print_col("Partition summary written to %s" % summary_file, GREEN,
                  quiet=arg.quiet)

    return partition_set


def get_args(arg_list=None, unittest=False):

    # The inclusion of the argument definition in main, makes it possible to
    # import this file as a module and not triggering argparse.
    parser = argparse.ArgumentParser(description="Command line interface for "
                                                 "AlnPart. Splits an "
                                                 "alignment according to a "
                                                 "partition file")

    # Main execution
    main_exec = parser.add_argument_group("Main execution")
    main_exec.add_argument("-in", dest="infile", help="Provide the input "
                           "alignment file (fasta or phylip)")
    main_exec.add_argument("-p", "--partition-file", dest="partition_file",
                           help="File containing the definition of the "
                           "partitions, one per line (e.g. 'GTR, gene1 = "
                           "1-100')")
    main_exec.add_argument("-o", dest="outfile", help="Prefix of the output "
                           "files. With --convert, name of the output "
                           "partition file")
    main_exec.add_argument("-of", dest="output_format",
                           choices=["fasta", "phylip"],
                           help="Format of the output alignments (default is"
                           " 'fasta')")

    # Alternative modes
    alternative = parser.add_argument_group("Alternative execution modes")
    alternative.add_argument("--convert", dest="convert",
                             choices=["raxml", "nexus"],
                             help="Only writes the partition file in the "
                             "selected format, with contiguous ranges "
                             "merged")
    alternative.add_argument("--no-site-check", dest="check_sites",
                             action="store_const", const=False,
                             help="Allow alignment sites that do not belong "
                             "to any partition")
    alternative.add_argument("--summary", dest="summary",
                             action="store_const", const=True,
                             help="Writes a csv table with the model and "
                             "number of sites of each partition")

    # Configuration
    config = parser.add_argument_group("Configuration")
    config.add_argument("-cfg", dest="config_file", help="Name of the "
                        "configuration file")
    config.add_argument("--generate-cfg", dest="generate_cfg",
                        action="store_const", const=True, default=False,
                        help="Generates a configuration template file")

    miscellaneous = parser.add_argument_group("Miscellaneous")
    miscellaneous.add_argument("-quiet", dest="quiet", action="store_const",
                               const=True, default=False, help="Removes all "
                               "terminal output")

    args = parser.parse_args(arg_list)

    # Print help when no arguments are provided
    if len(sys.argv) == 1 and not unittest:
        parser.print_help()
        sys.exit(1)

    return args


def main():
    arguments = get_args()
    partseq_arg_check(arguments)
    main_parser(arguments)


if __name__ == "__main__":

    main()


__author__ = "Diogo N. Silva"
