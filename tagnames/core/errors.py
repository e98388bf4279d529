"""Error hierarchy shared by the tag subsystems.

:class:`CoreError` subclasses are recoverable: they report bad input (a
malformed tag string, a broken config file) and are meant to be handled by the
caller. :class:`UninitializedSetError` is the exception to that rule: it marks
a programming defect and intentionally sits outside the hierarchy so that
``except CoreError`` handlers never swallow it.
"""
from __future__ import annotations


class CoreError(Exception):
    """Base class for all recoverable exceptions in the package."""


class InvalidTagError(CoreError, ValueError):
    """Raised when a string or kind/id pair does not form a valid tag."""

    def __init__(self, tag_input: str) -> None:
        super().__init__(f'"{tag_input}" is not a valid tag')
        self.input = tag_input


class CatalogueError(CoreError):
    """Raised when a tag kind cannot be registered or removed."""


class ConfigurationError(CoreError):
    """Raised when a loaded configuration cannot be applied."""


class UninitializedSetError(RuntimeError):
    """Raised when a TagSet that was never constructed is mutated."""

    MESSAGE = "uninitialised set"

    def __init__(self) -> None:
        super().__init__(self.MESSAGE)
