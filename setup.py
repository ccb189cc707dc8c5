from setuptools import setup

import alnpart

VERSION = alnpart.__version__

with open('README.rst') as f:
    readme = f.read()

setup(
    name="alnpart",
    version=VERSION,
    packages=["alnpart",
              "alnpart.base",
              "alnpart.process",
              "alnpart.tests"],
    package_data={"alnpart.tests": ["data/*"]},
    install_requires=[
        "numpy",
        "pandas",
    ],
    description=("Partition definition parser and alignment splitter for "
                 "phylogenomic data sets"),
    long_description=readme,
    author="Diogo N. Silva",
    author_email="o.diogosilva@gmail.com",
    license="GPL3",
    classifiers=["Development Status :: 4 - Beta",
                 "Intended Audience :: Science/Research",
                 "License :: OSI Approved :: GNU General Public License v3 ("
                 "GPLv3)",
                 "Natural Language :: English",
                 "Operating System :: POSIX :: Linux",
                 "Operating System :: MacOS :: MacOS X",
                 "Operating System :: Microsoft :: Windows",
                 "Programming Language :: Python",
                 "Programming Language :: Python :: 3",
                 "Topic :: Scientific/Engineering :: Bio-Informatics"],
    entry_points={
        "console_scripts": [
            "PartSeq = alnpart.PartSeq:main"
        ]
    },
)
