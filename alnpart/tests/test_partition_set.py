#!/usr/bin/env python

import os
import shutil
import tempfile
import unittest

from alnpart.process.data import PartitionSet
from alnpart.process.base import merger
from alnpart.process.error_handling import PartitionOutOfBounds, \
    InvalidModulo, InvalidRange, OverlappingPartitions, IncompleteCoverage, \
    PartitionRangeError


class PartitionSetTest(unittest.TestCase):

    def setUp(self):

        self.ps = PartitionSet(10)
        self.ps.add_range("p1", "GTR", 0, 4, 1)
        self.ps.add_range("p2", "HKY", 5, 9, 2)
        self.ps.add_range("p3", "JC", 6, 8, 2)

        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):

        shutil.rmtree(self.temp_dir)

    def test_new_partition_set_is_unassigned(self):

        ps = PartitionSet(5)

        self.assertEqual(ps.n_partitions(), 0)
        self.assertEqual(ps.ali_length(), 5)
        self.assertEqual([ps.partition(i) for i in range(5)], [-1] * 5)

    def test_partition_codes(self):

        self.assertEqual([self.ps.partition(i) for i in range(10)],
                         [0, 0, 0, 0, 0, 1, 2, 1, 2, 1])

    def test_partition_outside_alignment(self):

        self.assertEqual(self.ps.partition(-1), -1)
        self.assertEqual(self.ps.partition(10), -1)

    def test_names_and_models(self):

        self.assertEqual(self.ps.n_partitions(), 3)
        self.assertEqual(len(self.ps), 3)
        self.assertEqual(self.ps.partition_name(1), "p2")
        self.assertEqual(self.ps.model_name(2), "JC")
        self.assertEqual(self.ps.partition_name(3), "")
        self.assertEqual(self.ps.model_name(-1), "")

    def test_existing_partition_keeps_code(self):

        ps = PartitionSet(10)
        ps.add_range("p1", "GTR", 0, 1, 1)
        ps.add_range("p2", "JC", 2, 3, 1)
        ps.add_range("p1", "GTR", 4, 5, 1)

        self.assertEqual(ps.names, ["p1", "p2"])
        self.assertEqual(ps.sites(0).tolist(), [0, 1, 4, 5])

    def test_model_conflict_keeps_first_model(self):

        ps = PartitionSet(10)
        ps.add_range("p1", "GTR", 0, 1, 1)

        with self.assertLogs("alnpart.process.data", level="WARNING"):
            ps.add_range("p1", "JC", 2, 3, 1)

        self.assertEqual(ps.models, ["GTR"])

    def test_out_of_bounds(self):

        with self.assertRaises(PartitionOutOfBounds):
            self.ps.add_range("p4", "GTR", -1, 3, 1)

        ps = PartitionSet(10)
        with self.assertRaises(PartitionOutOfBounds):
            ps.add_range("p1", "GTR", 5, 10, 1)

    def test_invalid_modulo(self):

        ps = PartitionSet(10)

        for modulo in [0, -3]:
            with self.assertRaises(InvalidModulo):
                ps.add_range("p1", "GTR", 0, 9, modulo)

    def test_start_after_end(self):

        ps = PartitionSet(10)

        with self.assertRaises(InvalidRange):
            ps.add_range("p1", "GTR", 5, 4, 1)

    def test_overlap(self):

        with self.assertRaises(OverlappingPartitions) as cm:
            self.ps.add_range("p4", "GTR", 4, 4, 1)

        self.assertIn("site 4", str(cm.exception))

    def test_failed_range_leaves_set_unchanged(self):

        ps = PartitionSet(10)
        ps.add_range("p1", "GTR", 8, 8, 1)

        with self.assertRaises(PartitionRangeError):
            ps.add_range("p2", "JC", 0, 9, 1)

        self.assertEqual(ps.names, ["p1"])
        self.assertEqual(ps.sites(0).tolist(), [8])
        self.assertEqual((ps.site_partitions == -1).sum(), 9)

    def test_check_sites(self):

        self.ps.check_sites()

        ps = PartitionSet(10)
        ps.add_range("p1", "GTR", 0, 9, 2)

        with self.assertRaises(IncompleteCoverage) as cm:
            ps.check_sites()

        self.assertIn("(1)", str(cm.exception))

    def test_ranges(self):

        self.assertEqual(self.ps.ranges(0), [(0, 4)])
        self.assertEqual(self.ps.ranges(1), [(5, 5), (7, 7), (9, 9)])
        self.assertEqual(PartitionSet(3).ranges(0), [])

    def test_iter(self):

        self.assertEqual([x[0] for x in self.ps], ["p1", "p2", "p3"])
        self.assertEqual(list(self.ps)[2], ("p3", "JC", [(6, 6), (8, 8)]))

    def test_str(self):

        self.assertEqual(str(self.ps),
                         "GTR,p1=1-5\nHKY,p2=6,8,10\nJC,p3=7,9\n")

    def test_str_merges_contiguous_ranges(self):

        ps = PartitionSet(20)
        ps.add_range("p1", "GTR", 0, 9, 2)
        ps.add_range("p1", "GTR", 1, 9, 2)
        ps.add_range("p1", "GTR", 14, 19, 1)

        self.assertEqual(str(ps), "GTR,p1=1-10,15-20\n")

    def test_summary_table(self):

        table = self.ps.summary_table()

        self.assertEqual(list(table.index), ["p1", "p2", "p3"])
        self.assertEqual(list(table.loc["p2"]), ["HKY", 3, 6, 10])
        self.assertEqual(list(table.columns),
                         ["model", "nsites", "first", "last"])

    def test_write_raxml(self):

        out = os.path.join(self.temp_dir, "part.txt")
        self.ps.write_to_file("raxml", out)

        with open(out) as fh:
            self.assertEqual(fh.read(), str(self.ps))

    def test_write_nexus(self):

        out = os.path.join(self.temp_dir, "part.nex")
        self.ps.write_to_file("nexus", out)

        with open(out) as fh:
            self.assertEqual(fh.read(),
                             "#NEXUS\n\nbegin sets;\n"
                             "\tcharset p1 = 1-5;\n"
                             "\tcharset p2 = 6 8 10;\n"
                             "\tcharset p3 = 7 9;\n"
                             "end;\n")

    def test_write_unknown_format(self):

        with self.assertRaises(ValueError):
            self.ps.write_to_file("mrbayes", os.path.join(self.temp_dir,
                                                          "part"))


class MergerTest(unittest.TestCase):

    def test_merger(self):

        self.assertEqual(list(merger([(1, 234), (235, 456), (560, 607),
                                      (608, 789)])),
                         [(1, 456), (560, 789)])

    def test_merger_from_zero(self):

        self.assertEqual(list(merger([(0, 0), (1, 1), (3, 3)])),
                         [(0, 1), (3, 3)])

    def test_merger_empty(self):

        self.assertEqual(list(merger([])), [])


if __name__ == "__main__":
    unittest.main()
