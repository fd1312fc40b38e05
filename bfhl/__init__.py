"""BFHL API - single-endpoint numeric and AI dispatch service."""

__version__ = "1.0.0"
