"""Singly linked chain and stack algorithms: building, merging, searching, sorting and binary conversion."""

__version__ = "0.1.0"