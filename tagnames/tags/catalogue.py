"""Registry of tag kinds and their id validation rules.

Every tag kind is described by a :class:`KindSpec`: the regular expression an
id must match plus the pair of functions translating between the id and the
suffix used in the canonical ``"<kind>-<suffix>"`` string. Built-in kinds are
registered at import time; further kinds can be added at runtime, either
directly through :func:`register_kind` or from a loaded config file.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Pattern

from tagnames.config.models import NamesConfig
from tagnames.core.enums import TagKind
from tagnames.core.errors import CatalogueError, ConfigurationError
from tagnames.core.types import SuffixTranslator

logger = logging.getLogger("tagnames.catalogue")

KIND_NAME_RE = re.compile(r"^[a-z][a-z0-9]*$")

_NUMBER = r"(?:0|[1-9][0-9]*)"
_APPLICATION = r"[a-z][a-z0-9]*(?:-[a-z0-9]*[a-z][a-z0-9]*)*"
_UUID = r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"


def _identity(value: str) -> str:
    return value


def _slashes_to_dashes(value: str) -> str:
    return value.replace("/", "-")


def _dashes_to_slashes(value: str) -> str:
    return value.replace("-", "/")


def _unit_id_from_suffix(suffix: str) -> str:
    # The unit number follows the last dash; application names may hold dashes.
    application, sep, number = suffix.rpartition("-")
    if not sep:
        return suffix
    return f"{application}/{number}"


@dataclass(frozen=True, slots=True)
class KindSpec:
    """Validation and suffix rules for one tag kind."""

    name: str
    pattern: Pattern[str]
    id_from_suffix: SuffixTranslator = field(default=_identity)
    suffix_from_id: SuffixTranslator = field(default=_identity)
    description: str | None = None

    def is_valid_id(self, tag_id: str) -> bool:
        return self.pattern.fullmatch(tag_id) is not None


def _builtin_specs() -> list[KindSpec]:
    return [
        KindSpec(
            name=TagKind.MACHINE.value,
            pattern=re.compile(rf"{_NUMBER}(?:/[a-z]+/{_NUMBER})*"),
            id_from_suffix=_dashes_to_slashes,
            suffix_from_id=_slashes_to_dashes,
            description="Machine or container, e.g. 0 or 0/lxd/1",
        ),
        KindSpec(
            name=TagKind.UNIT.value,
            pattern=re.compile(rf"{_APPLICATION}/{_NUMBER}"),
            id_from_suffix=_unit_id_from_suffix,
            suffix_from_id=_slashes_to_dashes,
            description="Application unit, e.g. wordpress/0",
        ),
        KindSpec(
            name=TagKind.APPLICATION.value,
            pattern=re.compile(_APPLICATION),
            description="Deployed application",
        ),
        KindSpec(
            name=TagKind.MODEL.value,
            pattern=re.compile(_UUID),
            description="Model UUID",
        ),
        KindSpec(
            name=TagKind.CONTROLLER.value,
            pattern=re.compile(_UUID),
            description="Controller UUID",
        ),
        KindSpec(
            name=TagKind.USER.value,
            pattern=re.compile(
                r"[a-zA-Z0-9](?:[a-zA-Z0-9.+-]*[a-zA-Z0-9])?"
                r"(?:@[a-zA-Z0-9](?:[a-zA-Z0-9.-]*[a-zA-Z0-9])?)?"
            ),
            description="User name with optional @domain",
        ),
        KindSpec(
            name=TagKind.ACTION.value,
            pattern=re.compile(_NUMBER),
            description="Numeric action id",
        ),
        KindSpec(
            name=TagKind.SPACE.value,
            pattern=re.compile(r"[a-z0-9]+(?:-[a-z0-9]+)*"),
            description="Network space",
        ),
        KindSpec(
            name=TagKind.CLOUD.value,
            pattern=re.compile(r"[a-zA-Z0-9][a-zA-Z0-9.-]*"),
            description="Cloud name",
        ),
    ]


KIND_REGISTRY: Dict[str, KindSpec] = {spec.name: spec for spec in _builtin_specs()}


def get_kind(name: str) -> KindSpec:
    """Return the spec for ``name``; raise ``KeyError`` if it is not registered."""

    try:
        return KIND_REGISTRY[name]
    except KeyError as exc:
        raise KeyError(f"Tag kind {name!r} is not registered") from exc


def is_known_kind(name: str) -> bool:
    return name in KIND_REGISTRY


def known_kinds() -> list[str]:
    return sorted(KIND_REGISTRY)


def is_valid_id(kind: str, tag_id: str) -> bool:
    """Report whether ``tag_id`` is a valid id for ``kind`` (False if unknown)."""

    spec = KIND_REGISTRY.get(kind)
    return spec is not None and spec.is_valid_id(tag_id)


def register_kind(spec: KindSpec, *, replace: bool = False) -> KindSpec:
    """Add ``spec`` to the registry.

    Kind names may not contain a dash: the first dash of a canonical tag string
    always separates the kind from the id suffix.
    """

    if not KIND_NAME_RE.match(spec.name):
        raise CatalogueError(f"Invalid tag kind name: {spec.name!r}")
    if spec.name in KIND_REGISTRY and not replace:
        raise CatalogueError(f"Tag kind {spec.name!r} is already registered")
    KIND_REGISTRY[spec.name] = spec
    logger.info(
        "Registered tag kind",
        extra={"kind": spec.name, "pattern": spec.pattern.pattern, "replaced": replace},
    )
    return spec


def unregister_kind(name: str) -> KindSpec:
    try:
        spec = KIND_REGISTRY.pop(name)
    except KeyError as exc:
        raise CatalogueError(f"Tag kind {name!r} is not registered") from exc
    logger.info("Unregistered tag kind", extra={"kind": name})
    return spec


def register_kinds_from_config(config: NamesConfig) -> list[KindSpec]:
    """Register every kind declared in ``config`` (identity suffix rule).

    Nothing is registered if any entry clashes with an existing kind.
    """

    clashes = [entry.name for entry in config.kinds if entry.name in KIND_REGISTRY]
    if clashes:
        raise ConfigurationError(f"Config redefines registered tag kinds: {', '.join(clashes)}")
    registered: list[KindSpec] = []
    for entry in config.kinds:
        spec = KindSpec(
            name=entry.name,
            pattern=re.compile(entry.id_pattern),
            description=entry.description,
        )
        try:
            registered.append(register_kind(spec))
        except CatalogueError as exc:
            raise ConfigurationError(str(exc)) from exc
    return registered


__all__ = [
    "KIND_REGISTRY",
    "KindSpec",
    "get_kind",
    "is_known_kind",
    "is_valid_id",
    "known_kinds",
    "register_kind",
    "register_kinds_from_config",
    "unregister_kind",
]
