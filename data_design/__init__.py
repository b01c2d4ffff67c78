"""Validated profile, article and clap entities with relational persistence."""

__version__ = "0.1.0"
