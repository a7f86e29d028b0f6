"""
Top-level package for the cathode material explorer.

This package exposes the core architecture (records, filtering, derived views,
UI adapters). Most code should import from submodules such as:
    cathode_explorer.core
    cathode_explorer.analysis
    cathode_explorer.ui
"""

__all__: list[str] = []
