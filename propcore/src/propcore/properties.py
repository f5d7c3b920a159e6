"""
Re-export the properties modules for cleaner imports.

This allows: from propcore.properties import SmartProperties
Instead of: from propcore.meta.classes.smart_properties import SmartProperties
"""

from .meta.classes.smart_properties import (
    PropertiesMetaclass,
    SmartProperties,
    initialize_properties,
)
from .meta.properties import (
    SUPPORTED_OPTIONS,
    AcceptanceError,
    ConfigurationError,
    ConversionError,
    MissingPropertiesError,
    Property,
    PropertyAccessor,
    PropertyError,
    PropertySpec,
    PropertySpecModificationError,
    RequirednessError,
    declare_property,
    display_name,
    effective_properties,
    get_property,
    has_property,
    local_properties,
    property_spec,
    property_values,
    set_property,
)

__all__ = [
    "SmartProperties",
    "PropertiesMetaclass",
    "initialize_properties",
    "Property",
    "PropertyAccessor",
    "PropertySpec",
    "SUPPORTED_OPTIONS",
    "declare_property",
    "effective_properties",
    "has_property",
    "local_properties",
    "property_spec",
    "get_property",
    "set_property",
    "property_values",
    "display_name",
    "PropertyError",
    "ConfigurationError",
    "ConversionError",
    "AcceptanceError",
    "RequirednessError",
    "PropertySpecModificationError",
    "MissingPropertiesError",
]
