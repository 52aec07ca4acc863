"""
Top-level package for the Cinema API.

Makes ``cinema_api`` importable so modules under ``app`` can be
referenced by fully qualified names such as ``cinema_api.app.main``.
All functionality lives in submodules under ``app``.
"""

__all__ = []
