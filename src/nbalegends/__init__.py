"""NBA legends: stored and generated player records, comparisons and chat."""

__version__ = "0.1.0"
