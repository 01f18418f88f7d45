"""
Top‑level package for the After School Classes API.

This file makes ``afterschool_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``afterschool_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
