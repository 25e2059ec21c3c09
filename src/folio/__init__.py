"""Folio: directory listing backend for file-browser shells."""

__version__ = "0.1.0"
