"""filterRPF - Filter Ribosome Protected Fragments by read length.

A toolkit for selecting read lengths in Ribo-seq experiments, either from a
user-supplied list or from the trinucleotide periodicity of read ends along
coding sequences.
"""

__version__ = "0.1.0"
__author__ = "Jack Tierney"
