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
Description: Comprehensive tests for the SmartProperties class and instance construction.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import doctest
import itertools
import logging
from types import SimpleNamespace
from typing import Literal, Optional, Union

import pytest

from propcore.abstract.exceptions import traced_exceptions
from propcore.meta.classes import smart_properties
from propcore.meta.properties import accessors, processors
from propcore.properties import (
    AcceptanceError,
    ConfigurationError,
    ConversionError,
    MissingPropertiesError,
    PropertiesMetaclass,
    Property,
    RequirednessError,
    SmartProperties,
    declare_property,
    initialize_properties,
)


def titled(title: str) -> SimpleNamespace:
    """An object converting to `title` through its to_title method."""
    return SimpleNamespace(to_title=lambda: title)


@pytest.fixture(name="dummy")
def fixture_dummy() -> type:
    """A class with a required, converted and defaulted title."""

    class TestDummy(SmartProperties):
        """Test"""

        title = Property(
            accepts=str, converts="to_title", required=True, default=titled("chunky")
        )

    return TestDummy


# =============================================================================
# Class Creation
# =============================================================================


class TestClassCreation:
    """Test classes deriving from SmartProperties."""

    def test_metaclass(self):
        """Test that subclasses use the properties metaclass."""

        class Article(SmartProperties):
            """Test"""

        assert isinstance(Article, PropertiesMetaclass)

    def test_display_name_keyword(self):
        """Test that the display_name keyword is stored on the class."""

        class Article(SmartProperties, display_name="Blog Article"):
            """Test"""

        assert Article.__display_name__ == "Blog Article"

    def test_introspection(self, dummy):
        """Test the introspection methods of the metaclass."""

        class News(dummy):
            """Test"""

            text = Property()

        assert News.has_property("title")
        assert "text" in News
        assert "text" not in dummy
        assert list(News) == ["title", "text"]
        assert list(News.properties()) == ["title", "text"]
        assert list(News.local_properties()) == ["text"]

    def test_unsupported_options_in_class_body(self):
        """Test that a class declaring unsupported options cannot be created."""
        with pytest.raises(ConfigurationError) as exc_info:

            class Article(SmartProperties):
                """Test"""

                title = Property(invalid_option_1="boom", invalid_option_2="boom")

            _ = Article

        assert str(exc_info.value) == (
            "SmartProperties do not support the following configuration options: "
            "invalid_option_1, invalid_option_2."
        )

    def test_declare_property_method(self):
        """Test runtime declaration through the class method."""

        class Article(SmartProperties):
            """Test"""

        spec = Article.declare_property("title", required=True)

        assert Article.properties() == {"title": spec}
        assert hasattr(Article(title="Hi"), "title")


# =============================================================================
# Instances
# =============================================================================


class TestInstances:
    """Test instances of a class with a converted, required, defaulted property."""

    def test_default_is_converted(self, dummy):
        """Test that the default goes through conversion."""
        assert dummy().title == "chunky"

    def test_assignment_is_converted(self, dummy):
        """Test that assigned values are converted."""
        instance = dummy()
        instance.title = titled("bacon")

        assert instance.title == "bacon"

    def test_none_assignment_refused(self, dummy):
        """Test that None cannot be assigned to the required title."""
        instance = dummy()

        with pytest.raises(RequirednessError) as exc_info:
            instance.title = None

        assert str(exc_info.value) == "TestDummy requires the property title to be set."

    def test_unconvertible_assignment_refused(self, dummy):
        """Test that objects without the conversion method are refused."""
        with pytest.raises(ConversionError) as exc_info:
            dummy().title = object()

        assert str(exc_info.value) == "object does not respond to #to_title."

    def test_instances_are_independent(self, dummy):
        """Test that instances built from different attributes do not interfere."""
        instance = dummy()
        other = dummy({"title": titled("Lorem ipsum")})

        assert instance.title == "chunky"
        assert other.title == "Lorem ipsum"

    def test_initializer(self, dummy):
        """Test construction with an initializer."""

        def initializer(instance):
            instance.title = titled("bacon")

        assert dummy(initializer).title == "bacon"

    def test_initializer_errors_propagate(self, dummy):
        """Test that an initializer assigning None to a required property fails at once."""

        def initializer(instance):
            instance.title = None

        with pytest.raises(RequirednessError):
            dummy(initializer)

    def test_repr(self, dummy):
        """Test the representation of instances."""
        assert repr(dummy()) == "TestDummy(title='chunky')"


# =============================================================================
# Subclasses
# =============================================================================


class TestSubclasses:
    """Test subclasses of classes with properties."""

    def test_subclass_inherits_properties(self, dummy):
        """Test that a subclass has the properties of its base."""

        class Sub(dummy):
            """Test"""

        assert Sub.has_property("title")
        assert Sub().title == "chunky"
        assert Sub(title=titled("Message")).title == "Message"

    def test_subclass_with_own_property(self, dummy):
        """Test a subclass adding a property."""

        class Sub(dummy):
            """Test"""

            text = Property()

        from_attributes = Sub({"title": titled("Message"), "text": "Hello"})
        assert from_attributes.title == "Message"
        assert from_attributes.text == "Hello"

        def initializer(instance):
            instance.title = titled("Message")
            instance.text = "Hello"

        from_initializer = Sub(initializer)
        assert from_initializer.title == "Message"
        assert from_initializer.text == "Hello"

        assert not hasattr(dummy(), "text")

    def test_attributes_and_initializer(self, dummy):
        """Test that the initializer runs after the attributes are assigned."""

        class Sub(dummy):
            """Test"""

            text = Property()

        seen = []

        def initializer(instance):
            seen.append(instance.text)
            instance.text = instance.text.upper()

        instance = Sub({"text": "hello"}, initializer)

        assert seen == ["hello"]
        assert instance.text == "HELLO"


# =============================================================================
# Runtime Extension
# =============================================================================


class TestRuntimeExtension:
    """Test properties declared after classes and instances exist."""

    def test_property_added_to_existing_class(self, dummy):
        """Test that a property added at runtime is available on the class and subclasses."""
        dummy.declare_property("type", converts=str.upper)

        class Sub(dummy):
            """Test"""

        assert dummy.has_property("title") and dummy.has_property("type")
        instance = Sub(title=titled("Lorem ipsum"), type="news")
        assert instance.title == "Lorem ipsum"
        assert instance.type == "NEWS"

    def test_base_extended_after_subclass(self):
        """Test that a base extended after its subclass exists extends the subclass."""

        class Article(SmartProperties):
            """Test"""

            title = Property()

        class News(Article):
            """Test"""

            body = Property()

        existing = News()
        Article.declare_property("priority")

        assert Article.has_property("title") and Article.has_property("priority")
        assert all(News.has_property(name) for name in ("title", "body", "priority"))

        existing.priority = "low"
        assert existing.priority == "low"

        def initializer(instance):
            instance.title = "Lorem Ipsum"
            instance.priority = "low"
            instance.body = "Lorem ipsum dolor sit amet."

        assert News(initializer).priority == "low"
        assert News(
            {"title": "Lorem Ipsum", "priority": "low", "body": "Lorem ipsum dolor sit amet."}
        ).priority == "low"


# =============================================================================
# Defaults
# =============================================================================


class TestDefaults:
    """Test default resolution during construction."""

    @pytest.fixture(name="optional_title")
    def fixture_optional_title(self) -> type:
        """A class with an optional title defaulting to 'Lorem Ipsum'."""

        class Article(SmartProperties):
            """Test"""

            title = Property(default="Lorem Ipsum")

        return Article

    def test_explicit_none_suppresses_default(self, optional_title):
        """Test that an explicit None is kept instead of the default."""
        assert optional_title({"title": None}).title is None
        assert optional_title(title=None).title is None

    def test_default_without_arguments(self, optional_title):
        """Test that the default is used without arguments."""
        assert optional_title().title == "Lorem Ipsum"

    def test_default_with_empty_initializer(self, optional_title):
        """Test that the default is used with an initializer that does nothing."""
        assert optional_title(lambda _: None).title == "Lorem Ipsum"

    def test_callable_default_called_per_instance(self):
        """Test that auto-incrementing ids are produced by a callable default."""
        counter = itertools.count(1)

        class Article(SmartProperties):
            """Test"""

            id = Property(default=lambda: next(counter))

        first, second = Article(), Article()

        assert second.id - first.id == 1

    def test_mutable_default_factory(self):
        """Test that a factory gives each instance its own object."""

        class Article(SmartProperties):
            """Test"""

            tags = Property(default=list)

        a, b = Article(), Article()
        a.tags.append("python")

        assert b.tags == []

    def test_default_checked_by_acceptance(self):
        """Test that an unacceptable default fails construction."""

        class Article(SmartProperties, display_name="Article"):
            """Test"""

            visible = Property(accepts=[True, False], default="maybe")

        with pytest.raises(AcceptanceError, match="Article does not accept 'maybe'"):
            Article()

        assert Article(visible=True).visible is True


# =============================================================================
# Requiredness
# =============================================================================


class TestRequiredness:
    """Test the requiredness check at the end of construction."""

    @pytest.fixture(name="required_title")
    def fixture_required_title(self) -> type:
        """A class with a required title and no default."""

        class Article(SmartProperties, display_name="Dummy"):
            """Test"""

            title = Property(required=True)

        return Article

    def test_given_in_attributes(self, required_title):
        """Test that the title can be given as attribute."""
        assert required_title({"title": "Lorem Ipsum"}).title == "Lorem Ipsum"

    def test_given_in_initializer(self, required_title):
        """Test that the title can be set by the initializer."""

        def initializer(instance):
            instance.title = "Lorem Ipsum"

        assert required_title(initializer).title == "Lorem Ipsum"

    def test_missing(self, required_title):
        """Test that a missing title is reported."""
        with pytest.raises(MissingPropertiesError) as exc_info:
            required_title()

        assert str(exc_info.value) == (
            "Dummy requires the following properties to be set: title"
        )
        assert exc_info.value.names == ("title",)

    def test_explicit_none_fails_immediately(self, required_title):
        """Test that an explicit None for a required property is refused on assignment."""
        with pytest.raises(RequirednessError, match="Dummy requires the property title"):
            required_title(title=None)

    def test_every_missing_property_reported(self):
        """Test that all missing properties are reported, in declaration order."""

        class Article(SmartProperties, display_name="Article"):
            """Test"""

            title = Property(required=True)
            body = Property()
            author = Property(required=True)
            slug = Property(required=True, default=lambda: None)

        with pytest.raises(MissingPropertiesError) as exc_info:
            Article(body="text")

        assert str(exc_info.value) == (
            "Article requires the following properties to be set: title, author, slug"
        )

    def test_false_default_satisfies_requiredness(self):
        """Test that a False default is a value, not a missing one."""

        class Flagged(SmartProperties, display_name="Dummy"):
            """Test"""

            flag = Property(required=True, default=False)

        assert Flagged().flag is False
        assert Flagged({"flag": True}).flag is True
        assert Flagged(lambda i: setattr(i, "flag", True)).flag is True

    def test_article_scenario(self):
        """Test the basic required title scenario."""

        class Article(SmartProperties, display_name="Article"):
            """Test"""

            title = Property(required=True)

        with pytest.raises(
            MissingPropertiesError,
            match="^Article requires the following properties to be set: title$",
        ):
            Article()

        assert Article(title="Hi").title == "Hi"


# =============================================================================
# Plain Classes
# =============================================================================


class TestInitializeProperties:
    """Test initializing instances of classes that do not derive from SmartProperties."""

    def test_plain_class(self, caplog):
        """Test initialize_properties on a plain class, ignoring unknown attributes."""

        class Article:
            """Test"""

            def __init__(self, **attributes):
                initialize_properties(self, attributes)

        declare_property(Article, "title", required=True)
        declare_property(Article, "visible", accepts=bool, default=True)

        with caplog.at_level(logging.DEBUG, logger="propcore.meta.classes.smart_properties"):
            article = Article(title="Hi", color="red")

        assert article.title == "Hi"
        assert article.visible is True
        assert not hasattr(article, "color")
        assert "Ignoring attributes color" in caplog.text

        with pytest.raises(MissingPropertiesError, match="Article requires"):
            Article()


# =============================================================================
# Reserved Names
# =============================================================================


class TestReservedNames:
    """Test that properties cannot hide the introspection methods of the metaclass."""

    @pytest.mark.parametrize(
        "name", ["properties", "local_properties", "has_property", "declare_property"]
    )
    def test_class_body_declaration_refused(self, name):
        """Test that a class declaring a reserved name cannot be created."""
        with pytest.raises(ConfigurationError, match="reserved by the metaclass") as exc_info:
            type("Config", (SmartProperties,), {name: Property()})

        assert exc_info.value.value == name
        assert hasattr(PropertiesMetaclass, name)

    def test_runtime_declaration_refused(self):
        """Test that a reserved name cannot be declared at runtime."""

        class Article(SmartProperties):
            """Test"""

        with pytest.raises(ConfigurationError) as exc_info:
            Article.declare_property("has_property")

        assert str(exc_info.value) == (
            "Property name 'has_property' is reserved by the metaclass PropertiesMetaclass "
            "of Article."
        )
        assert Article.properties() == {}
        assert Article.has_property("title") is False

    def test_plain_class_accepts_any_name(self):
        """Test that classes with the default metaclass have no reserved names."""

        class Config:
            """Test"""

            properties = Property(default=dict)

            def __init__(self):
                initialize_properties(self)

        assert Config().properties == {}


# =============================================================================
# Typing Matchers
# =============================================================================


class TestTypingMatchers:
    """Test properties accepting values described with typing constructs."""

    def test_optional(self):
        """Test a property accepting Optional[str]."""

        class Article(SmartProperties, display_name="Article"):
            """Test"""

            title = Property(accepts=Optional[str])

        article = Article(title="Hi")

        with pytest.raises(AcceptanceError, match="Article does not accept 3"):
            article.title = 3

        article.title = None
        assert article.title is None

    def test_generic_alias(self):
        """Test a property accepting list[int] checks the container class."""

        class Article(SmartProperties, display_name="Article"):
            """Test"""

            ids = Property(accepts=list[int])

        assert Article(ids=[1, 2]).ids == [1, 2]

        with pytest.raises(AcceptanceError, match="Article does not accept 'abc'"):
            Article(ids="abc")

    def test_union_of_generic_aliases(self):
        """Test a property accepting Union[list[int], dict[str, int]]."""

        class Article(SmartProperties, display_name="Article"):
            """Test"""

            counts = Property(accepts=Union[list[int], dict[str, int]])

        assert Article(counts={"a": 1}).counts == {"a": 1}

        with pytest.raises(AcceptanceError):
            Article(counts=(1, 2))

    def test_literal(self):
        """Test a property accepting a Literal of allowed values."""

        class Article(SmartProperties, display_name="Article"):
            """Test"""

            status = Property(accepts=Literal["draft", "published"], default="draft")

        assert Article().status == "draft"

        with pytest.raises(AcceptanceError, match="Article does not accept 'deleted'"):
            Article(status="deleted")


# =============================================================================
# Documentation
# =============================================================================


class TestDocumentation:
    """Test the examples given in the docstrings."""

    @pytest.mark.parametrize(
        "module",
        [
            traced_exceptions,
            processors,
            accessors,
            smart_properties,
        ],
    )
    def test_docstring_examples(self, module):
        """Test that the docstring examples of the module run as written."""
        results = doctest.testmod(module)

        assert results.attempted > 0
        assert results.failed == 0
