"""Flat file copy utility."""

__version__ = "0.1.0"
