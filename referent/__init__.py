"""Referent: Russian translations, summaries and posts for English articles."""

__version__ = "0.1.0"
