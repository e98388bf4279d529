"""Tag values, the kind catalogue and tag sets."""

from .catalogue import (
    KindSpec,
    get_kind,
    is_known_kind,
    is_valid_id,
    known_kinds,
    register_kind,
    register_kinds_from_config,
    unregister_kind,
)
from .tag import Tag, parse_tag
from .tagset import TagSet

__all__ = [
    "KindSpec",
    "Tag",
    "TagSet",
    "get_kind",
    "is_known_kind",
    "is_valid_id",
    "known_kinds",
    "parse_tag",
    "register_kind",
    "register_kinds_from_config",
    "unregister_kind",
]
