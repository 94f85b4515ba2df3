"""Pure domain utilities for token URIs.

Kept free of CLI and environment concerns so they can be unit-tested and
reused on their own.
"""
__all__ = ["uri"]
