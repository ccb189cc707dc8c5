#!/usr/bin/env python

import os
import shutil
import tempfile
import unittest
from os.path import join

from alnpart.PartSeq import get_args, main_parser, generate_cfg_template
from alnpart.base.sanity import partseq_arg_check
from alnpart.process.sequence import Alignment
from alnpart.process.parser import read_partitions
from alnpart.tests.data_files import example_fas, example_phy, \
    partitions_file, partitions_bad, partitions_incomplete, \
    partitions_overlap


class PartSeqTest(unittest.TestCase):

    def setUp(self):

        self.output_dir = tempfile.mkdtemp()
        self.prefix = join(self.output_dir, "part_")

    def tearDown(self):

        shutil.rmtree(self.output_dir)

    def run_partseq(self, arg_list):

        args = get_args(arg_list + ["-quiet"], unittest=True)
        partseq_arg_check(args)
        return main_parser(args)

    def test_split(self):

        self.run_partseq(["-in", example_fas, "-p", partitions_file,
                          "-o", self.prefix])

        aln = Alignment(example_fas)

        for name in ["gene1", "gene2", "gene3"]:
            self.assertTrue(os.path.exists(self.prefix + name + ".fas"))

        gene1 = Alignment(self.prefix + "gene1.fas")
        self.assertEqual(gene1.sequences["spc"], aln.sequences["spc"][:10])

    def test_split_phylip(self):

        self.run_partseq(["-in", example_phy, "-p", partitions_file,
                          "-o", self.prefix, "-of", "phylip"])

        gene3 = Alignment(self.prefix + "gene3.phy")

        self.assertEqual(gene3.locus_length, 10)
        self.assertEqual(gene3.taxa_names, ["spa", "spb", "spc", "spd"])

    def test_summary(self):

        self.run_partseq(["-in", example_fas, "-p", partitions_file,
                          "-o", self.prefix, "--summary"])

        with open(self.prefix + "partition_summary.csv") as fh:
            lines = fh.read().splitlines()

        self.assertEqual(lines[0], "partition,model,nsites,first,last")
        self.assertEqual(lines[2], "gene2,HKY,10,11,29")

    def test_incomplete_coverage(self):

        with self.assertRaises(SystemExit):
            self.run_partseq(["-in", example_fas,
                              "-p", partitions_incomplete,
                              "-o", self.prefix])

    def test_no_site_check(self):

        ps = self.run_partseq(["-in", example_fas,
                               "-p", partitions_incomplete,
                               "-o", self.prefix, "--no-site-check"])

        self.assertEqual(ps.n_partitions(), 2)
        self.assertTrue(os.path.exists(self.prefix + "gene2.fas"))

    def test_bad_partition_file(self):

        with self.assertRaises(SystemExit):
            self.run_partseq(["-in", example_fas, "-p", partitions_bad,
                              "-o", self.prefix])

    def test_overlapping_partitions(self):

        with self.assertRaises(SystemExit):
            self.run_partseq(["-in", example_fas, "-p", partitions_overlap,
                              "-o", self.prefix])

    def test_convert_raxml(self):

        out = join(self.output_dir, "partitions.txt")
        self.run_partseq(["-in", example_fas, "-p", partitions_file,
                          "-o", out, "--convert", "raxml"])

        with open(out) as fh:
            self.assertEqual(fh.read(),
                             str(read_partitions(partitions_file, 30)))

    def test_convert_nexus(self):

        out = join(self.output_dir, "partitions.nex")
        self.run_partseq(["-in", example_fas, "-p", partitions_file,
                          "-o", out, "--convert", "nexus"])

        with open(out) as fh:
            data = fh.read()

        self.assertTrue(data.startswith("#NEXUS"))
        self.assertIn("charset gene1 = 1-10;", data)

    def test_convert_requires_output(self):

        with self.assertRaises(SystemExit):
            self.run_partseq(["-in", example_fas, "-p", partitions_file,
                              "--convert", "raxml"])

    def test_missing_partition_file(self):

        with self.assertRaises(SystemExit):
            self.run_partseq(["-in", example_fas])

        with self.assertRaises(SystemExit):
            self.run_partseq(["-in", example_fas, "-p",
                              join(self.output_dir, "nothing.txt")])

    def test_config_file(self):

        cfg = join(self.output_dir, "settings.ini")
        with open(cfg, "w") as fh:
            fh.write("[Split]\n"
                     "out_prefix: %s\n"
                     "output_format: phylip\n"
                     "summary: yes\n" % join(self.output_dir, "cfg_"))

        self.run_partseq(["-in", example_fas, "-p", partitions_file,
                          "-cfg", cfg])

        self.assertTrue(os.path.exists(join(self.output_dir,
                                            "cfg_gene1.phy")))
        self.assertTrue(os.path.exists(join(self.output_dir,
                                            "cfg_partition_summary.csv")))

    def test_command_line_overrides_config(self):

        cfg = join(self.output_dir, "settings.ini")
        with open(cfg, "w") as fh:
            fh.write("[Split]\noutput_format: phylip\ncheck_sites: no\n")

        self.run_partseq(["-in", example_fas, "-p", partitions_incomplete,
                          "-cfg", cfg, "-of", "fasta", "-o", self.prefix])

        self.assertTrue(os.path.exists(self.prefix + "gene1.fas"))
        self.assertFalse(os.path.exists(self.prefix + "gene1.phy"))

    def test_invalid_format_in_config(self):

        cfg = join(self.output_dir, "settings.ini")
        with open(cfg, "w") as fh:
            fh.write("[Split]\noutput_format: nexus\n")

        with self.assertRaises(SystemExit):
            self.run_partseq(["-in", example_fas, "-p", partitions_file,
                              "-cfg", cfg])

    def test_generate_cfg(self):

        template = generate_cfg_template(join(self.output_dir,
                                              "template.ini"))

        cfg = join(self.output_dir, "template.ini")
        self.assertEqual(template, cfg)

        ps = self.run_partseq(["-in", example_fas, "-p", partitions_file,
                               "-cfg", cfg, "-o", self.prefix])

        self.assertEqual(ps.n_partitions(), 3)
        self.assertTrue(os.path.exists(self.prefix + "gene3.fas"))

    def test_generate_cfg_option(self):

        cwd = os.getcwd()
        os.chdir(self.output_dir)
        try:
            self.run_partseq(["--generate-cfg"])
            self.assertTrue(os.path.exists("partseq_template.ini"))
        finally:
            os.chdir(cwd)


if __name__ == "__main__":
    unittest.main()
