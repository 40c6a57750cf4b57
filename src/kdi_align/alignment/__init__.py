"""Alignment engine: namespacing, vocabulary mapping, builders and assembly."""
