"""
propcore: Declarative, validated properties for Python classes.

This library provides:
- Property declaration with requiredness, acceptance rules, conversion and defaults
- SmartProperties, a base class building instances from declared properties
- Inheritance aware property resolution, including properties added at runtime to base classes
- TracedException for enhanced exception formatting
"""

__version__ = "0.1.0"
__author__ = "Sébastien Gachoud"
__license__ = "MIT"

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",
]
