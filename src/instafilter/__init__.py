"""Instafilter: pick a photo, apply a filter, save the result."""

__version__ = "1.0.0"
