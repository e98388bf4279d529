"""Typed identifiers ("tags") for entities in a distributed system.

The package exposes the tag value type, the kind catalogue that validates tag
ids, and :class:`TagSet`, a unique collection of tags with set algebra and a
deterministic enumeration order.
"""

from .core.errors import CoreError, InvalidTagError, UninitializedSetError
from .tags import Tag, TagSet, parse_tag

__all__ = [
    "CoreError",
    "InvalidTagError",
    "Tag",
    "TagSet",
    "UninitializedSetError",
    "parse_tag",
]
