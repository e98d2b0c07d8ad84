[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "nucleoscan"
version = "0.1.0"
description = "Small nucleotide sequence tools: k-mer database search, pairwise alignment and Markov codon-transition gene finding"
requires-python = ">=3.10"
dependencies = []
keywords = ["bioinformatics", "fasta", "kmer", "alignment", "markov", "gene-finding"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nucleoscan-align = "nucleoscan.alignment:main"
nucleoscan-search = "nucleoscan.report:main"
nucleoscan-genefind = "nucleoscan.genefind:main"

[tool.setuptools.packages.find]
include = ["nucleoscan*"]

[tool.pytest.ini_options]
addopts = "-ra"
