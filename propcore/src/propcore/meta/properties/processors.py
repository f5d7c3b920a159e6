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
Description: This module turns the options of a property declaration into processors:
            - validators, from the `accepts` option: a type descriptor (class, union, generic
              alias or tuple of those), a Literal or collection of allowed values, or a predicate.
            - converters, from the `converts` option: the name of a method of the value, or a
              unary callable.
            - defaulters, from the `default` option: a zero-argument callable or a literal.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from collections.abc import Collection
from types import UnionType
from typing import Any, Callable, Literal, Union, get_args, get_origin

from .errors import ConfigurationError, ConversionError

type Validator = Callable[[Any], bool]
type Converter = Callable[[Any], Any]
type Defaulter = Callable[[], Any]

type IsinstanceTarget = type | tuple[IsinstanceTarget, ...]


def isinstance_target(accepts: Any) -> IsinstanceTarget | None:
    """Resolve an `accepts` option to a second argument of isinstance.

    Unions (int | str, Union[int, str], Optional[str]) become tuples of their members, and
    parameterized generics (list[int]) are checked on their origin (list). Typing.Any accepts
    every object.

    Args:
        accepts (Any): the option to resolve.

    Returns:
        IsinstanceTarget | None: the target, None if the option is not a type descriptor.
    """
    if accepts is Any:
        return object
    origin = get_origin(accepts)
    if origin is Union or origin is UnionType:
        members = tuple(map(isinstance_target, get_args(accepts)))
        return None if None in members else members
    if isinstance(origin, type):
        return origin
    if origin is None and isinstance(accepts, type):
        return accepts
    if isinstance(accepts, tuple) and accepts:
        members = tuple(map(isinstance_target, accepts))
        return None if None in members else members
    return None


def is_type_matcher(accepts: Any) -> bool:
    """Check if an `accepts` option is a type descriptor: a class, a union, a parameterized
    generic or a non empty tuple of those.

    Args:
        accepts (Any): the option to check.

    Returns:
        bool: Whether the option matches values by type.
    """
    return isinstance_target(accepts) is not None


def is_values_matcher(accepts: Any) -> bool:
    """Check if an `accepts` option is a collection of allowed values. Strings and bytes are not
    considered collections of values.

    Args:
        accepts (Any): the option to check.

    Returns:
        bool: Whether the option matches values by equality.
    """
    return isinstance(accepts, Collection) and not isinstance(
        accepts, (str, bytes, bytearray)
    )


def type_validator(accepts: Any) -> Validator:
    """Create a validator checking that values are instances of the type descriptor `accepts`."""
    target = isinstance_target(accepts)
    if target is None:
        raise ConfigurationError(
            f"Option 'accepts' must be a type descriptor, got {accepts!r}.",
            option="accepts",
            value=accepts,
        )

    def validator(value: Any) -> bool:
        return isinstance(value, target)

    return validator


def values_validator(accepts: Collection[Any]) -> Validator:
    """Create a validator checking that values are equal to one of `accepts`.

    Membership is tested by equality, so unhashable values and unhashable allowed values both
    work.
    """
    allowed = tuple(accepts)

    def validator(value: Any) -> bool:
        return any(value == a for a in allowed)

    return validator


def predicate_validator(accepts: Callable[[Any], Any]) -> Validator:
    """Create a validator from a predicate. Any truthy result accepts the value (a re.Match for
    instance)."""

    def validator(value: Any) -> bool:
        return bool(accepts(value))

    return validator


def validator_from_option(accepts: Any) -> Validator:
    """Create a validator from the `accepts` option of a property declaration. The kind of
    validator is picked by the category of the option, type descriptors first since they are
    callable.

    Args:
        accepts (Any): the `accepts` option.

    Raises:
        ConfigurationError: Raised when the option is of no supported category.

    Returns:
        Validator: A function that returns True if a value is accepted.
    """
    if is_type_matcher(accepts):
        return type_validator(accepts)
    if get_origin(accepts) is Literal:
        return values_validator(get_args(accepts))
    if is_values_matcher(accepts):
        return values_validator(accepts)
    if callable(accepts):
        return predicate_validator(accepts)
    raise ConfigurationError(
        f"Option 'accepts' must be a class, a collection of values or a predicate, got {accepts!r}.",
        option="accepts",
        value=accepts,
    )


def method_converter(method_name: str) -> Converter:
    """Create a converter calling, without arguments, the method `method_name` of the value.

    Args:
        method_name (str): name of the conversion method.

    Returns:
        Converter: A function that converts a value using its own method.
    """

    def converter(value: Any) -> Any:
        method = getattr(value, method_name, None)
        if not callable(method):
            raise ConversionError(value, method_name)
        return method()

    return converter


def converter_from_option(converts: Any) -> Converter:
    """Create a converter from the `converts` option of a property declaration. Errors raised
    by a callable converter are not wrapped.

    Args:
        converts (Any): a method name or a unary callable.

    Raises:
        ConfigurationError: Raised when the option is neither a string nor a callable.

    Returns:
        Converter: The converter.
    """
    if isinstance(converts, str):
        return method_converter(converts)
    if callable(converts):
        return converts
    raise ConfigurationError(
        f"Option 'converts' must be a method name or a callable, got {converts!r}.",
        option="converts",
        value=converts,
    )


def defaulter_from_option(default: Any) -> Defaulter:
    """Create a defaulter from the `default` option of a property declaration. Callables are
    called for each instance, anything else is returned as is.

    Examples:
        >>> defaulter_from_option(list)()
        []
        >>> defaulter_from_option("Lorem Ipsum")()
        'Lorem Ipsum'
    """
    if callable(default):
        return default
    return lambda: default
