"""
Top‑level package for the Soccer Results API.

This file makes ``soccer_results_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``soccer_results_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
