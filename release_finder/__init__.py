"""Find the most recent copy of every file across a tree of ZIP archives."""

__version__ = "0.1.0"
