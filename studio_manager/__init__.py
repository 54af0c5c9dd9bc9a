"""
Top-level package for Studio Manager.

All functionality lives in submodules under ``app``; import the entry
point as ``studio_manager.app.main.create_app``.
"""

__all__ = []
