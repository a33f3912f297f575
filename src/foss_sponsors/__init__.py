"""Scrapers and normalizers for open-source foundation sponsor lists."""

__version__ = "0.1.0"
