"""Evaluator helper modules for the Tally runtime."""

__all__ = [
    "bind",
    "blocks",
    "common",
    "expr",
    "literals",
]
