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

import os

from alnpart.process.base import print_col, RED, YELLOW


def partseq_arg_check(arg):

    if arg.generate_cfg:
        return 0

    if arg.infile is None:
        print_col("Must provide the input alignment using the '-in' option",
                  RED)

    if not os.path.exists(arg.infile):
        print_col("Input alignment %s does not exist" % arg.infile, RED)

    if arg.partition_file is None:
        print_col("Must provide the partition file using the '-p' option",
                  RED)

    if not os.path.exists(arg.partition_file):
        print_col("Partition file %s does not exist" % arg.partition_file,
                  RED)

    if arg.config_file is not None and not os.path.exists(arg.config_file):
        print_col("Configuration file %s does not exist" % arg.config_file,
                  RED)

    if arg.convert and arg.outfile is None:
        print_col("An output file must be provided with option '-o' when "
                  "converting the partition file", RED)

    if arg.convert and (arg.summary or arg.output_format):
        print_col("Ignoring output format (-of) and summary (--summary) "
                  "options when converting the partition file (--convert)",
                  YELLOW, quiet=arg.quiet)

    return 0
