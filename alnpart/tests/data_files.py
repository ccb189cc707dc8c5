"""
Contains data file paths for testing
"""

from os.path import join, dirname

data_path = join(dirname(__file__), "data")

################################################################################
#                           Alignments
################################################################################

example_fas = join(data_path, "example.fas")

example_phy = join(data_path, "example.phy")

################################################################################
#                           Partitions
################################################################################

partitions_file = join(data_path, "partitions.txt")

partitions_crlf = join(data_path, "partitions_crlf.txt")

partitions_bad = join(data_path, "partitions_bad.txt")

partitions_incomplete = join(data_path, "partitions_incomplete.txt")

partitions_overlap = join(data_path, "partitions_overlap.txt")
