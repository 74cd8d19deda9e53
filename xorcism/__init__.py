"""Stateful repeating-key XOR munging for bytes, iterables and binary streams."""

__version__ = "0.1.0"
__all__ = ["munger"]