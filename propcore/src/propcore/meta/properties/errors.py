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
Description: Errors raised while declaring properties or assigning their values. Every error
             derives from PropertyError, which is both a TracedException and a ValueError.
             Messages name the owning class by its display name and list every offending key or
             property.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from typing import Any, Iterable

from ...abstract.exceptions.traced_exceptions import TracedException


class PropertyError(TracedException, ValueError):
    """Base class of every property related error."""


class ConfigurationError(PropertyError):
    """Signals a property declaration with unsupported options or option values."""

    @classmethod
    def unsupported_options(cls, keys: Iterable[str]) -> "ConfigurationError":
        """Create the error reporting every unsupported configuration option.

        Args:
            keys (Iterable[str]): the unsupported option keys, in the order they were given.

        Returns:
            ConfigurationError: the error to raise.
        """
        keys = tuple(keys)
        return cls(
            "SmartProperties do not support the following configuration options: "
            f"{', '.join(keys)}.",
            keys=keys,
        )


class ConversionError(PropertyError):
    """Signals a value that does not provide the conversion method of a property."""

    def __init__(self, value: Any, converter: str) -> None:
        super().__init__(
            f"{type(value).__name__} does not respond to #{converter}.",
            value=value,
            converter=converter,
        )


class AcceptanceError(PropertyError):
    """Signals a value refused by the acceptance rule of a property."""

    def __init__(self, owner: str, name: str, value: Any) -> None:
        super().__init__(
            f"{owner} does not accept {value!r} as value for the property {name}.",
            owner=owner,
            name=name,
            value=value,
        )


class RequirednessError(PropertyError):
    """Signals None being assigned to a required property."""

    def __init__(self, owner: str, name: str) -> None:
        super().__init__(
            f"{owner} requires the property {name} to be set.", owner=owner, name=name
        )


class MissingPropertiesError(PropertyError):
    """Signals required properties left unset once an instance is constructed."""

    def __init__(self, owner: str, names: Iterable[str]) -> None:
        names = tuple(names)
        super().__init__(
            f"{owner} requires the following properties to be set: {', '.join(names)}",
            owner=owner,
            names=names,
        )


class PropertySpecModificationError(TracedException, AttributeError):
    """Signals an attempt to modify a declared PropertySpec. Redeclare the property instead."""

    def __init__(self, name: str, attribute: str) -> None:
        super().__init__(
            f"Attribute '{attribute}' of the spec of property '{name}' cannot be modified. "
            "Reason: Property specs cannot be modified, redeclare the property instead.",
            attribute=attribute,
        )
