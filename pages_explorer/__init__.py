# /__init__.py
# GitHub Pages Explorer: lists a user's repositories that have GitHub Pages enabled.
__version__ = "0.1.0"
