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
Description: The value pipeline of a property. A PropertySpec holds the declared options of one
             property and processes every value assigned to it:
             1. None skips conversion and acceptance, and is refused only by required properties.
             2. The value is converted.
             3. The converted value is checked against the acceptance rule.
             Values are kept in a per instance storage that only this pipeline writes.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from typing import Any, NoReturn

from .errors import AcceptanceError, PropertySpecModificationError, RequirednessError
from .processors import (
    Converter,
    Defaulter,
    Validator,
    converter_from_option,
    defaulter_from_option,
    validator_from_option,
)

STORAGE_ATTRIBUTE = "__property_values__"

_MISSING: Any = object()


def display_name(owner: type) -> str:
    """Name of a class as used in error messages: its `__display_name__` when it has one, its
    `__name__` otherwise.

    Args:
        owner (type): the class.

    Returns:
        str: the display name.
    """
    return getattr(owner, "__display_name__", None) or owner.__name__


def property_values(instance: Any) -> dict[str, Any]:
    """Storage of the property values of an instance. Created on first access.

    Args:
        instance (Any): the instance.

    Returns:
        dict[str, Any]: the mapping of property names to values.
    """
    return vars(instance).setdefault(STORAGE_ATTRIBUTE, {})


def read_value(instance: Any, name: str) -> Any:
    """Read a property value. Unset properties read as None."""
    return property_values(instance).get(name)


class PropertySpec:
    """Declared options of a property. Specs are never modified, redeclaring a property creates a
    new spec.

    Args:
        name (str): name of the property.
        required (bool): whether None is refused. Defaults to False.
        accepts (Any): class, tuple of classes, union, collection of allowed values or
            predicate. Defaults to no acceptance check.
        converts (Any): method name or unary callable. Defaults to no conversion.
        default (Any): literal or zero-argument callable. Defaults to no default.
    """

    __slots__ = ("name", "required", "accepts", "converts", "_default", "_validator", "_converter",
                 "_defaulter")

    name: str
    required: bool
    accepts: Any
    converts: Any

    _validator: Validator | None
    _converter: Converter | None
    _defaulter: Defaulter | None

    def __init__(
        self,
        name: str,
        required: bool = False,
        accepts: Any = None,
        converts: Any = None,
        default: Any = _MISSING,
    ) -> None:
        # Slots are filled through object.__setattr__, __setattr__ refuses any change.
        init = object.__setattr__
        init(self, "name", name)
        init(self, "required", required)
        init(self, "accepts", accepts)
        init(self, "converts", converts)
        init(self, "_default", default)
        init(self, "_validator", None if accepts is None else validator_from_option(accepts))
        init(self, "_converter", None if converts is None else converter_from_option(converts))
        init(self, "_defaulter", None if default is _MISSING else defaulter_from_option(default))

    def __setattr__(self, attribute: str, value: Any) -> NoReturn:
        raise PropertySpecModificationError(self.name, attribute)

    def __delattr__(self, attribute: str) -> NoReturn:
        raise PropertySpecModificationError(self.name, attribute)

    @property
    def has_default(self) -> bool:
        """Whether a default was declared."""
        return self._defaulter is not None

    @property
    def default(self) -> Any:
        """The declared default option, None when there is none."""
        return None if self._default is _MISSING else self._default

    def resolve_default(self) -> Any:
        """Produce a default value. Callable defaults are called on each resolution.

        Returns:
            Any: the default value, None when no default was declared.
        """
        if self._defaulter is None:
            return None
        return self._defaulter()

    def convert(self, value: Any) -> Any:
        """Convert a value that is not None. Without converter the value is returned as is."""
        if self._converter is None:
            return value
        return self._converter(value)

    def accepts_value(self, value: Any) -> bool:
        """Check a value against the acceptance rule. Without rule every value is accepted."""
        return self._validator is None or self._validator(value)

    def prepare(self, owner: type, value: Any) -> Any:
        """Run a candidate value through the pipeline.

        Args:
            owner (type): class of the instance receiving the value, for error messages.
            value (Any): the candidate value.

        Raises:
            RequirednessError: Raised when the value is None and the property is required.
            ConversionError: Raised when the value does not provide the conversion method.
            AcceptanceError: Raised when the converted value is refused.

        Returns:
            Any: the value to store.
        """
        if value is None:
            if self.required:
                raise RequirednessError(display_name(owner), self.name)
            return None
        value = self.convert(value)
        if not self.accepts_value(value):
            raise AcceptanceError(display_name(owner), self.name, value)
        return value

    def __repr__(self) -> str:
        options = [f"required={self.required!r}"]
        if self.accepts is not None:
            options.append(f"accepts={self.accepts!r}")
        if self.converts is not None:
            options.append(f"converts={self.converts!r}")
        if self.has_default:
            options.append(f"default={self._default!r}")
        return f"<PropertySpec {self.name}({', '.join(options)})>"


def write_value(instance: Any, spec: PropertySpec, value: Any) -> Any:
    """Assign a value to a property of an instance through the pipeline of its spec.

    Args:
        instance (Any): the instance.
        spec (PropertySpec): the spec of the property.
        value (Any): the candidate value.

    Returns:
        Any: the stored value.
    """
    value = spec.prepare(type(instance), value)
    property_values(instance)[spec.name] = value
    return value
