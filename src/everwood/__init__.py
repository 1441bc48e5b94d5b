"""Everwood panel designer core.

Pricing, color harmony and share-link encoding for custom wooden art panels.
"""

__version__ = "0.1.0"
