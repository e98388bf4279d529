"""Unique collection of tags with set algebra.

A :class:`TagSet` keys its members by canonical tag string, so uniqueness,
equality and enumeration order never depend on how :class:`Tag` hashes.
"""
from __future__ import annotations

from typing import Dict, Iterator

from tagnames.core.errors import UninitializedSetError

from .tag import Tag, parse_tag


class TagSet:
    """Mutable set of tags.

    Only the constructor allocates storage. An instance created without it
    (``TagSet.__new__(TagSet)``) is *uninitialised*: it reads as empty, but
    :meth:`add` and :meth:`remove` raise :class:`UninitializedSetError` instead
    of silently allocating. Not thread-safe.
    """

    __slots__ = ("_values",)

    _values: Dict[str, Tag] | None

    def __init__(self, *tags: Tag) -> None:
        self._values = {}
        for tag in tags:
            self._values[str(tag)] = tag

    @classmethod
    def from_strings(cls, *values: str) -> "TagSet":
        """Build a set from canonical tag strings.

        Every string is parsed before the set is created; the first invalid one
        raises :class:`InvalidTagError` and no set is returned.
        """

        return cls(*[parse_tag(value) for value in values])

    @classmethod
    def _from_mapping(cls, values: Dict[str, Tag]) -> "TagSet":
        result = cls()
        result._values = values
        return result

    def _storage(self) -> Dict[str, Tag]:
        values = getattr(self, "_values", None)
        if values is None:
            raise UninitializedSetError()
        return values

    def _items(self) -> Dict[str, Tag]:
        return getattr(self, "_values", None) or {}

    # Queries -----------------------------------------------------------
    def size(self) -> int:
        return len(self._items())

    def is_empty(self) -> bool:
        return self.size() == 0

    def contains(self, tag: Tag) -> bool:
        return str(tag) in self._items()

    def values(self) -> list[Tag]:
        """Return the members in no particular order."""

        return list(self._items().values())

    def sorted_values(self) -> list[Tag]:
        """Return the members ordered by ascending canonical string."""

        items = self._items()
        return [items[key] for key in sorted(items)]

    # Mutation ----------------------------------------------------------
    def add(self, tag: Tag) -> None:
        self._storage()[str(tag)] = tag

    def remove(self, tag: Tag) -> None:
        self._storage().pop(str(tag), None)

    # Algebra -----------------------------------------------------------
    def union(self, other: "TagSet") -> "TagSet":
        result = dict(self._items())
        result.update(other._items())
        return self._from_mapping(result)

    def intersection(self, other: "TagSet") -> "TagSet":
        theirs = other._items()
        return self._from_mapping({key: tag for key, tag in self._items().items() if key in theirs})

    def difference(self, other: "TagSet") -> "TagSet":
        theirs = other._items()
        return self._from_mapping({key: tag for key, tag in self._items().items() if key not in theirs})

    # Python protocols ----------------------------------------------------
    def __len__(self) -> int:
        return self.size()

    def __contains__(self, tag: object) -> bool:
        return isinstance(tag, Tag) and self.contains(tag)

    def __iter__(self) -> Iterator[Tag]:
        return iter(self.sorted_values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TagSet):
            return NotImplemented
        return self._items().keys() == other._items().keys()

    __hash__ = None  # type: ignore[assignment]

    def __or__(self, other: object) -> "TagSet":
        if not isinstance(other, TagSet):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: object) -> "TagSet":
        if not isinstance(other, TagSet):
            return NotImplemented
        return self.intersection(other)

    def __sub__(self, other: object) -> "TagSet":
        if not isinstance(other, TagSet):
            return NotImplemented
        return self.difference(other)

    def __repr__(self) -> str:
        members = ", ".join(repr(key) for key in sorted(self._items()))
        return f"TagSet({members})"


__all__ = ["TagSet"]
