"""A small document store kept in JSON files, with an interactive shell."""

__version__ = "0.1.0"