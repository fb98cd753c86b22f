"""Fitness program workbook parser."""

__version__ = "0.1.0"
