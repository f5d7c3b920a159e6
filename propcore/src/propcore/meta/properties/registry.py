"""
MIT License

Copyright (c) 2025 Sébastien Gachoud

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.

-------------------------------------------------------------------------------

Author: Sébastien Gachoud
Created: 2026-10-19
Description: Registry of the properties declared on classes. Each class keeps its own
             declarations in its `__properties__` entry. The properties of a class are resolved
             on every query by walking its MRO from the root, so that a property declared on a
             base class after a subclass was created is seen by the subclass.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import logging
from typing import Any

from .errors import ConfigurationError
from .pipeline import PropertySpec

logger = logging.getLogger(__name__)

REGISTRY_ATTRIBUTE = "__properties__"
SUPPORTED_OPTIONS = ("required", "accepts", "converts", "default")


def validate_options(options: dict[str, Any]) -> None:
    """Verify the options of a property declaration.

    Args:
        options (dict[str, Any]): the options.

    Raises:
        ConfigurationError: Raised with every unsupported key when some keys are not supported, or
            when `required` is not a bool.
    """
    unsupported = [k for k in options if k not in SUPPORTED_OPTIONS]
    if unsupported:
        raise ConfigurationError.unsupported_options(unsupported)
    if not isinstance(options.get("required", False), bool):
        raise ConfigurationError(
            f"Option 'required' must be a bool, got {options['required']!r}.",
            option="required",
            value=options["required"],
        )


def local_properties(cls: type) -> dict[str, PropertySpec]:
    """Properties declared by the class itself, without its bases.

    Returns:
        dict[str, PropertySpec]: the class registry entry, empty if the class declares none.
    """
    # vars() and not getattr(): the entry of a base class must never be returned.
    return vars(cls).get(REGISTRY_ATTRIBUTE, {})


def register_property(cls: type, name: str, /, **options: Any) -> PropertySpec:
    """Create the spec of a property and store it in the registry entry of `cls`. A spec of the
    same name previously declared on `cls` is replaced.

    Args:
        cls (type): the declaring class.
        name (str): name of the property.
        **options: supported options are required, accepts, converts and default.

    Raises:
        ConfigurationError: Raised when the options are invalid.

    Returns:
        PropertySpec: the new spec.
    """
    validate_options(options)
    spec = PropertySpec(name, **options)
    if REGISTRY_ATTRIBUTE not in vars(cls):
        setattr(cls, REGISTRY_ATTRIBUTE, {})
    registry: dict[str, PropertySpec] = vars(cls)[REGISTRY_ATTRIBUTE]
    if name in registry:
        logger.debug("Redeclaring property '%s' of %s.", name, cls.__qualname__)
    registry[name] = spec
    logger.debug("Declared property %r on %s.", spec, cls.__qualname__)
    return spec


def effective_properties(cls: type) -> dict[str, PropertySpec]:
    """Properties of a class and of all its bases. Declarations of the most specific class win.
    Resolved on every call, never cached.

    Args:
        cls (type): the class.

    Returns:
        dict[str, PropertySpec]: a new mapping of property names to specs, in declaration order
            from the root class.
    """
    properties: dict[str, PropertySpec] = {}
    for klass in reversed(cls.__mro__):
        properties.update(local_properties(klass))
    return properties


def property_spec(cls: type, name: str) -> PropertySpec | None:
    """Effective spec of the property `name` of `cls`, None if there is none."""
    for klass in cls.__mro__:
        spec = local_properties(klass).get(name)
        if spec is not None:
            return spec
    return None


def has_property(cls: type, name: str) -> bool:
    """Check if a class or one of its bases declares the property `name`."""
    return property_spec(cls, name) is not None
