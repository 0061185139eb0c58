"""Exception hierarchy shared across Instafilter."""

from __future__ import annotations


class InstafilterError(Exception):
    """Base class for all application specific errors."""


class FilterNotFoundError(InstafilterError):
    """Raised when an unknown filter identifier is requested."""


class FilterEvaluationError(InstafilterError):
    """Raised when a filter cannot produce an output image."""


class NoImageSelectedError(InstafilterError):
    """Raised when an operation needs a processed image but none exists yet."""


class PhotoLibraryError(InstafilterError):
    """Raised when an image cannot be written to the photo library."""


class SettingsInvalidError(InstafilterError):
    """Raised when the persisted settings document is unreadable."""
