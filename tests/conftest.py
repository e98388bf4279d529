from __future__ import annotations

from typing import Iterator

import pytest

from tagnames.tags import Tag, parse_tag
from tagnames.tags.catalogue import KIND_REGISTRY


@pytest.fixture
def foo() -> Tag:
    return parse_tag("unit-wordpress-0")


@pytest.fixture
def bar() -> Tag:
    return parse_tag("unit-rabbitmq-server-0")


@pytest.fixture
def baz() -> Tag:
    return parse_tag("unit-mongodb-0")


@pytest.fixture
def bang() -> Tag:
    return parse_tag("machine-0")


@pytest.fixture
def restore_kind_registry() -> Iterator[None]:
    snapshot = dict(KIND_REGISTRY)
    yield
    KIND_REGISTRY.clear()
    KIND_REGISTRY.update(snapshot)
