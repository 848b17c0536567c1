"""Graph traversals, bubble/odd-even/merge sorts, numeric summaries and the omplab command."""

__version__ = "0.1.0"