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
Description: This module provides classes whose instances are built from declared properties:
             values given at construction go through the value pipeline, absent values fall back
             to the declared defaults, and required properties left unset are reported together.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import logging
from collections.abc import Iterator, Mapping
from typing import Any, Callable, ClassVar

from ..properties import (
    MissingPropertiesError,
    PropertySpec,
    declare_property,
    display_name,
    effective_properties,
    has_property,
    local_properties,
)
from ..properties.pipeline import property_values, read_value, write_value

logger = logging.getLogger(__name__)

type Initializer = Callable[[Any], Any]


def initialize_properties(
    instance: Any,
    attributes: Mapping[str, Any] | Initializer | None = None,
    initializer: Initializer | None = None,
    /,
    **kwargs: Any,
) -> None:
    """Initialize the properties of a new instance.

    Every property of the class of the instance is assigned, in declaration order, the value
    given for it (even None), or else its default. A default resolving to None leaves the property
    unset. The initializer is then called with the instance. Lastly, required properties still
    unset are reported together.

    Args:
        instance (Any): the instance to initialize.
        attributes (Mapping[str, Any] | Initializer | None): initial values, or the initializer
            when it is a callable.
        initializer (Initializer | None): called once with the instance after the values and
            defaults are assigned.
        **kwargs: initial values, merged over `attributes`.

    Raises:
        MissingPropertiesError: Raised when required properties are unset at the end.
        PropertyError: Raised by the value pipeline for any invalid value.
    """
    if initializer is None and callable(attributes) and not isinstance(attributes, Mapping):
        attributes, initializer = None, attributes
    values: dict[str, Any] = dict(attributes or {})
    values.update(kwargs)

    cls = type(instance)
    properties = effective_properties(cls)
    property_values(instance)

    for name, spec in properties.items():
        if name in values:
            write_value(instance, spec, values[name])
        elif spec.has_default:
            default = spec.resolve_default()
            if default is not None:
                write_value(instance, spec, default)

    unknown = [k for k in values if k not in properties]
    if unknown:
        logger.debug(
            "Ignoring attributes %s that are not properties of %s.",
            ", ".join(unknown),
            cls.__qualname__,
        )

    if initializer is not None:
        initializer(instance)

    missing = [
        name
        for name, spec in effective_properties(cls).items()
        if spec.required and read_value(instance, name) is None
    ]
    if missing:
        raise MissingPropertiesError(display_name(cls), missing)


class PropertiesMetaclass(type):
    """Metaclass of classes with properties. It accepts a `display_name` keyword, the name used
    in error messages, and gives the classes their introspection methods."""

    __display_name__: str

    def __new__(
        mcs,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        /,
        display_name: str | None = None,
        **kwargs: Any,
    ) -> Any:
        if display_name is not None:
            namespace["__display_name__"] = display_name
        return super().__new__(mcs, name, bases, namespace, **kwargs)

    def declare_property(cls, name: str, /, **options: Any) -> PropertySpec:
        """Declare a property on the class. See propcore.properties.declare_property."""
        return declare_property(cls, name, **options)

    def properties(cls) -> dict[str, PropertySpec]:
        """Return the properties of the class and its bases."""
        return effective_properties(cls)

    def local_properties(cls) -> dict[str, PropertySpec]:
        """Return the properties declared by the class itself."""
        return dict(local_properties(cls))

    def has_property(cls, name: str) -> bool:
        """Check if a property exists."""
        return has_property(cls, name)

    def __contains__(cls, name: str) -> bool:
        return has_property(cls, name)

    def __iter__(cls) -> Iterator[str]:
        return iter(effective_properties(cls))


class SmartProperties(metaclass=PropertiesMetaclass):
    """Base class of classes with properties.

    Examples:
        >>> class Article(SmartProperties, display_name="Article"):
        ...     pass
        >>> Article.declare_property("title", required=True, accepts=str)
        <PropertySpec title(required=True, accepts=<class 'str'>)>
        >>> Article.declare_property("visible", accepts=[True, False], default=True)
        <PropertySpec visible(required=False, accepts=[True, False], default=True)>

        >>> Article(title="Hi").visible
        True

        >>> Article()
        Traceback (most recent call last):
            ...
        propcore.meta.properties.errors.MissingPropertiesError: Article requires the following properties to be set: title

        >>> Article(lambda a: setattr(a, "title", "Hi")).title
        'Hi'

        >>> Article.declare_property("priority", converts=str.lower)
        <PropertySpec priority(required=False, converts=<method 'lower' of 'str' objects>)>
        >>> "priority" in Article
        True
    """

    __display_name__: ClassVar[str]

    def __init__(
        self,
        attributes: Mapping[str, Any] | Initializer | None = None,
        initializer: Initializer | None = None,
        /,
        **kwargs: Any,
    ) -> None:
        initialize_properties(self, attributes, initializer, **kwargs)

    def __repr__(self) -> str:
        values = ", ".join(
            f"{name}={read_value(self, name)!r}" for name in effective_properties(type(self))
        )
        return f"{type(self).__name__}({values})"
