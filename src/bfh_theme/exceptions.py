"""
Domain-specific exceptions for BFH branding helpers.

Every failure in the logo overlay pipeline surfaces as one of these, naming the
step that rejected the input.  All exceptions inherit from ``BFHThemeError`` so
callers can also use a single broad catch when needed.
"""

from __future__ import annotations


class BFHThemeError(Exception):
    """Base exception for all bfh_theme errors."""


class InvalidArgumentError(BFHThemeError, ValueError):
    """Raised when a helper receives an argument of the wrong type or range."""


class ConfigurationError(BFHThemeError):
    """Raised when environment configuration cannot be parsed."""


class AssetNotFoundError(BFHThemeError):
    """Raised when a variant/resolution pair has no bundled logo file."""


class PathSecurityError(BFHThemeError):
    """Raised when a logo path fails normalization, sandbox or file checks."""


class UnsupportedFileTypeError(BFHThemeError):
    """Raised when a file's magic bytes match no supported image format.

    Attributes
    ----------
    header:
        The leading bytes that were inspected.
    """

    def __init__(self, message: str, header: bytes = b"") -> None:
        super().__init__(message)
        self.header: bytes = header


class ImageDecodeError(BFHThemeError):
    """Raised when a file passes signature checks but cannot be decoded."""


class MissingCapabilityError(BFHThemeError):
    """Raised when the runtime lacks a decoder for the requested format."""


class InvalidAlphaError(InvalidArgumentError):
    """Raised when an opacity value lies outside [0, 1]."""


class InvalidPlotInputError(BFHThemeError):
    """Raised when the plot argument is not a matplotlib Figure."""
