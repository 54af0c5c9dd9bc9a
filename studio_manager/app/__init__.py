"""
Application package initializer.

The project is organised into ``core`` (configuration, logging, SQLite
and the key-value adapter), ``schemas`` (pydantic records) and
``services`` (stores, views and export).  ``create_app`` wires them
together.
"""

from .main import create_app  # noqa: F401
