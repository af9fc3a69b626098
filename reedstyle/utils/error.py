"""Error utility for reedstyle."""

class ReedStyleError(Exception):
    """Base exception for reedstyle."""
    pass

class ColorParseError(ReedStyleError, ValueError):
    """Raised when a color literal cannot be normalized."""
    pass

class InvalidHexError(ColorParseError):
    """Raised when a hex color is not exactly six hex digits."""
    pass

class InvalidComponentError(ColorParseError):
    """Raised when an rgb/hsl/oklch component is missing or not numeric."""
    pass

class UnsupportedFormatError(ColorParseError):
    """Raised when a color literal uses an unrecognized notation."""
    pass

class OptimizationError(ReedStyleError):
    """Raised when the CSS optimizer cannot process its input."""
    pass

class ConfigurationError(ReedStyleError):
    """Raised when configuration is invalid."""
    pass

# Exported exceptions
__all__ = [
    'ReedStyleError',
    'ColorParseError',
    'InvalidHexError',
    'InvalidComponentError',
    'UnsupportedFormatError',
    'OptimizationError',
    'ConfigurationError',
]
