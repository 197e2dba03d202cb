"""
Top-level package for the Zoo API.

All functionality lives in submodules under ``app``; this file only
marks the directory as a package so that fully qualified imports such
as ``zoo_api.app.main`` resolve.
"""

__all__ = []
