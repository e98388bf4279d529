"""Tag value type and the canonical string parser."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from tagnames.core.errors import InvalidTagError
from tagnames.core.types import TagString

from .catalogue import KIND_REGISTRY

logger = logging.getLogger("tagnames.tags")

KIND_SEPARATOR = "-"


@dataclass(frozen=True, slots=True, eq=False)
class Tag:
    """Validated ``kind`` + ``id`` pair.

    ``id`` is the natural identifier of the entity (``"wordpress/0"`` for a
    unit); ``str(tag)`` gives the canonical ``"<kind>-<suffix>"`` form
    (``"unit-wordpress-0"``). Equality and hashing only look at the canonical
    string. Construction raises :class:`InvalidTagError` when the kind is not
    registered or the id does not match the kind's rule.
    """

    kind: str
    id: str
    _canonical: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        kind = self.kind.value if isinstance(self.kind, Enum) else str(self.kind)
        object.__setattr__(self, "kind", kind)
        spec = KIND_REGISTRY.get(kind)
        if spec is None or not isinstance(self.id, str) or not spec.is_valid_id(self.id):
            raise InvalidTagError(f"{kind}{KIND_SEPARATOR}{self.id}")
        object.__setattr__(self, "_canonical", f"{kind}{KIND_SEPARATOR}{spec.suffix_from_id(self.id)}")

    def string(self) -> TagString:
        return TagString(self._canonical)

    def equals(self, other: "Tag") -> bool:
        return self.string() == other.string()

    def __str__(self) -> str:
        return self.string()

    def __repr__(self) -> str:
        return f"Tag({self.string()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tag):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self.string())


def parse_tag(value: str) -> Tag:
    """Parse a canonical tag string, raising :class:`InvalidTagError` on failure.

    The kind is everything before the first dash; the kind's catalogue entry
    turns the remaining suffix back into an id and validates it.
    """

    kind, sep, suffix = value.partition(KIND_SEPARATOR)
    spec = KIND_REGISTRY.get(kind)
    if not sep or spec is None:
        logger.debug("Rejected tag string", extra={"tag_input": value, "reason": "unknown kind"})
        raise InvalidTagError(value)
    tag_id = spec.id_from_suffix(suffix)
    if not spec.is_valid_id(tag_id):
        logger.debug("Rejected tag string", extra={"tag_input": value, "reason": "invalid id"})
        raise InvalidTagError(value)
    return Tag(kind, tag_id)


__all__ = ["KIND_SEPARATOR", "Tag", "parse_tag"]
