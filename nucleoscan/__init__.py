"""Nucleotide sequence tools: FASTA reading, k-mer search, pairwise alignment and Markov gene finding."""

__version__ = "0.1.0"
__all__ = ["fasta", "alignment", "blast", "report", "markov", "genefind"]