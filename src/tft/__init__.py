"""Washington CrRLJ 3.3 time-for-trial deadline calculator."""

__version__ = "0.1.0"
