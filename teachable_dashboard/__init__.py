"""
Core package for the Teachable course dashboard.

Submodules provide the Teachable API client, cached data loading, roster
joining/filtering, and user interface rendering helpers that are orchestrated
by the top-level `app.py`.
"""

__version__ = "0.1.0"
