"""Petak Fudbal: awards engine, stats and API for a Friday football group."""

__version__ = "0.1.0"
