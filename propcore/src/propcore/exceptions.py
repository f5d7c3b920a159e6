"""
Re-export exceptions modules for cleaner imports.

This allows: from propcore.exceptions import TracedException, AcceptanceError
Instead of: from propcore.abstract.exceptions.traced_exceptions import TracedException
"""

from .abstract.exceptions.traced_exceptions import TracedException, format_exception
from .meta.properties.errors import (
    AcceptanceError,
    ConfigurationError,
    ConversionError,
    MissingPropertiesError,
    PropertyError,
    PropertySpecModificationError,
    RequirednessError,
)

__all__ = [
    "TracedException",
    "format_exception",
    "PropertyError",
    "ConfigurationError",
    "ConversionError",
    "AcceptanceError",
    "RequirednessError",
    "PropertySpecModificationError",
    "MissingPropertiesError",
]
