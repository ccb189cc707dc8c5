"""
The `base` sub-package contains a single module:

`sanity`
--------
Contains the sanity checks performed on the arguments of the PartSeq CLI
program before its execution.
"""
