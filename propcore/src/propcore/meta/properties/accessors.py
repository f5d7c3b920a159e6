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
Description: Accessors of the declared properties. Declaring a property installs on the
             declaring class a PropertyAccessor, a data descriptor that reads the instance storage
             and routes assignments through the value pipeline of the effective spec.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import logging
from typing import Any, Self, overload

from .errors import ConfigurationError
from .pipeline import PropertySpec, read_value, write_value
from .registry import property_spec, register_property, validate_options

logger = logging.getLogger(__name__)


def get_property(instance: Any, name: str) -> Any:
    """Read the value of the property `name` of an instance. No validation happens on read.

    Returns:
        Any: the value, None if it was never set.
    """
    return read_value(instance, name)


def set_property(instance: Any, name: str, value: Any) -> Any:
    """Assign a value to the property `name` of an instance through the value pipeline.

    Args:
        instance (Any): the instance.
        name (str): the property name.
        value (Any): the candidate value.

    Raises:
        AttributeError: Raised when the class of the instance has no such property.

    Returns:
        Any: the stored value, after conversion.
    """
    spec = property_spec(type(instance), name)
    if spec is None:
        raise AttributeError(
            f"'{type(instance).__name__}' object has no property '{name}'"
        )
    return write_value(instance, spec, value)


class PropertyAccessor:
    """Getter and setter of one property. The spec is looked up on each assignment so that
    redeclarations are honored without reinstalling the accessor."""

    name: str

    def __init__(self, name: str) -> None:
        self.name = name

    @overload
    def __get__(self, instance: None, owner: type) -> Self: ...

    @overload
    def __get__(self, instance: object, owner: type) -> Any: ...

    def __get__(self, instance: object | None, owner: type) -> Any:
        if instance is None:
            return self
        return get_property(instance, self.name)

    def __set__(self, instance: object, value: Any) -> None:
        set_property(instance, self.name, value)

    def __repr__(self) -> str:
        return f"<PropertyAccessor {self.name}>"


def _has_accessor(cls: type, name: str) -> bool:
    return any(isinstance(vars(k).get(name), PropertyAccessor) for k in cls.__mro__)


def _verify_name(cls: type, name: str) -> None:
    """Verify that an accessor named `name` would not hide an attribute that the metaclass of
    `cls` gives the class, such as its introspection methods.

    Raises:
        ConfigurationError: Raised when the name is reserved by the metaclass.
    """
    for meta in type(cls).__mro__:
        if meta in (type, object):
            continue
        if name in vars(meta):
            raise ConfigurationError(
                f"Property name '{name}' is reserved by the metaclass {meta.__name__} of "
                f"{cls.__name__}.",
                option="name",
                value=name,
            )


def declare_property(cls: type, name: str, /, **options: Any) -> PropertySpec:
    """Declare the property `name` on `cls` and make sure instances of `cls` have an accessor
    for it. Can be called at any time, subclasses and existing instances see the new property.

    Args:
        cls (type): the declaring class.
        name (str): name of the property.
        **options: any of required (bool), accepts, converts and default.

    Raises:
        ConfigurationError: Raised when the options are invalid. Every unsupported option key
            is reported. Names of attributes given to the class by its metaclass are
            refused.

    Returns:
        PropertySpec: the declared spec.

    Examples:
        >>> class Article:
        ...     pass
        >>> declare_property(Article, "title", required=True, accepts=str)
        <PropertySpec title(required=True, accepts=<class 'str'>)>
    """
    _verify_name(cls, name)
    spec = register_property(cls, name, **options)
    if not _has_accessor(cls, name):
        setattr(cls, name, PropertyAccessor(name))
        logger.debug("Installed accessor of property '%s' on %s.", name, cls.__qualname__)
    return spec


class Property:
    """Declares a property from a class body. The declaration happens when the owner class is
    created, and this placeholder is replaced by the PropertyAccessor of the property.

    Examples:
        >>> class Article:
        ...     title = Property(required=True, accepts=str)
        >>> isinstance(vars(Article)["title"], PropertyAccessor)
        True
    """

    options: dict[str, Any]

    def __init__(self, **options: Any) -> None:
        validate_options(options)
        self.options = options

    def __set_name__(self, owner: type, name: str) -> None:
        # Drop the placeholder so that the accessor gets installed on the owner.
        delattr(owner, name)
        declare_property(owner, name, **self.options)
