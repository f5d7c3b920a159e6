"""Property declaration, resolution and value processing for propcore."""

from .accessors import (
    Property,
    PropertyAccessor,
    declare_property,
    get_property,
    set_property,
)
from .errors import (
    AcceptanceError,
    ConfigurationError,
    ConversionError,
    MissingPropertiesError,
    PropertyError,
    PropertySpecModificationError,
    RequirednessError,
)
from .pipeline import PropertySpec, display_name, property_values
from .registry import (
    SUPPORTED_OPTIONS,
    effective_properties,
    has_property,
    local_properties,
    property_spec,
)

__all__ = [
    # Core classes
    "Property",
    "PropertyAccessor",
    "PropertySpec",
    # Main API functions
    "declare_property",
    "effective_properties",
    "has_property",
    "local_properties",
    "property_spec",
    "get_property",
    "set_property",
    "property_values",
    "display_name",
    "SUPPORTED_OPTIONS",
    # Errors
    "PropertyError",
    "ConfigurationError",
    "ConversionError",
    "AcceptanceError",
    "RequirednessError",
    "PropertySpecModificationError",
    "MissingPropertiesError",
]
