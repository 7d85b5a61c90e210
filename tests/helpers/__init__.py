"""Test helpers module for shared test utilities.

- factories: shorthand constructors for decimal values
"""

from tests.helpers.factories import d, digits_of

__all__ = [
    "d",
    "digits_of",
]
