"""
Top‑level package for the Contact Manager API.

This file makes ``contact_manager`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``contact_manager.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
