"""
Top‑level package for the Catalog API.

Manages sectors and the classes that belong to them.  All
functionality lives in submodules under ``app``.
"""

__all__ = []
