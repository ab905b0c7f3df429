"""
outfmt CLI Package
===================
Command-line interface for rendering data files.
"""

from .main import app, main_entry, ContextInputSource

__all__ = ['app', 'main_entry', 'ContextInputSource']
