"""Linked-list, message-buffer and UDP chat exercises, with small command-line tools."""

__version__ = "0.1.0"