"""In-memory inverted index and search shell for trees of ASCII text files."""

__version__ = "0.1.0"