"""
Application package initializer.

The code is split into ``core`` (configuration, logging, the JSON
document store and id generation), ``services`` (record operations),
``schemas`` (documentation models) and ``api`` (HTTP routes grouped by
version).
"""

from .main import app  # noqa: F401
