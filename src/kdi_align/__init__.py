"""Alignment of the urban and extra-urban transit feeds into one open-data model."""

__version__ = "0.1.0"
