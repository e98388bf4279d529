from __future__ import annotations

import pytest

from tagnames.core.errors import CoreError, InvalidTagError, UninitializedSetError
from tagnames.tags import Tag, TagSet, parse_tag


def _uninitialised() -> TagSet:
    return TagSet.__new__(TagSet)


def test_tagset_empty_should_have_no_members() -> None:
    tags = TagSet()
    assert tags.size() == 0
    assert tags.is_empty() is True
    assert len(tags) == 0
    assert not tags


def test_tagset_initial_values_should_be_counted(foo: Tag, bar: Tag) -> None:
    assert TagSet(foo, bar).size() == 2


def test_tagset_from_strings_should_parse_values() -> None:
    tags = TagSet.from_strings("unit-wordpress-0", "unit-rabbitmq-server-0")
    assert tags.size() == 2


def test_tagset_from_strings_should_reject_bad_values() -> None:
    with pytest.raises(InvalidTagError, match='"not-a-tag" is not a valid tag') as excinfo:
        TagSet.from_strings("not-a-tag")
    assert excinfo.value.input == "not-a-tag"


def test_tagset_from_strings_should_report_first_bad_value() -> None:
    with pytest.raises(InvalidTagError) as excinfo:
        TagSet.from_strings("unit-wordpress-0", "machine-x", "not-a-tag")
    assert excinfo.value.input == "machine-x"


def test_tagset_size_should_count_unique_values() -> None:
    tags = TagSet.from_strings(
        "unit-wordpress-0",
        "unit-rabbitmq-server-0",
        "unit-wordpress-0",
    )
    assert tags.size() == 2


def test_tagset_is_empty_should_track_removals(foo: Tag) -> None:
    tags = TagSet(foo)
    assert tags.is_empty() is False
    tags.remove(foo)
    assert tags.is_empty() is True


def test_tagset_add_should_insert_member(foo: Tag) -> None:
    tags = TagSet()
    tags.add(foo)
    assert tags.size() == 1
    assert tags.contains(foo) is True
    assert foo in tags


def test_tagset_add_should_be_idempotent(foo: Tag, bar: Tag) -> None:
    tags = TagSet()
    tags.add(foo)
    tags.add(bar)
    tags.add(bar)
    tags.add(parse_tag("unit-rabbitmq-server-0"))
    assert tags.size() == 2


def test_tagset_remove_should_keep_other_members(foo: Tag, bar: Tag) -> None:
    tags = TagSet(foo, bar)
    tags.remove(foo)
    assert tags.contains(foo) is False
    assert tags.contains(bar) is True


def test_tagset_remove_missing_should_be_noop(foo: Tag, bar: Tag) -> None:
    tags = TagSet()
    tags.remove(foo)
    assert tags.size() == 0

    tags = TagSet(bar)
    tags.remove(foo)
    assert tags.sorted_values() == [bar]


def test_tagset_contains_should_match_by_canonical_string(foo: Tag, bar: Tag, baz: Tag) -> None:
    tags = TagSet.from_strings("unit-wordpress-0", "unit-rabbitmq-server-0")
    assert tags.contains(foo) is True
    assert tags.contains(bar) is True
    assert tags.contains(baz) is False
    assert tags.contains(Tag("unit", "wordpress/0")) is True
    assert "unit-wordpress-0" not in tags


def test_tagset_sorted_values_should_order_by_canonical_string(
    foo: Tag, bar: Tag, baz: Tag, bang: Tag
) -> None:
    tags = TagSet(foo, bang, baz, bar)
    expected = [bang, baz, bar, foo]
    assert tags.sorted_values() == expected
    assert tags.sorted_values() == expected
    assert list(tags) == expected
    assert [str(tag) for tag in tags] == [
        "machine-0",
        "unit-mongodb-0",
        "unit-rabbitmq-server-0",
        "unit-wordpress-0",
    ]


def test_tagset_sorted_values_should_not_depend_on_insertion_order(
    foo: Tag, bar: Tag, baz: Tag, bang: Tag
) -> None:
    assert TagSet(foo, bar, baz, bang).sorted_values() == TagSet(bang, baz, bar, foo).sorted_values()


def test_tagset_values_should_return_all_members(foo: Tag, bar: Tag) -> None:
    values = TagSet(foo, bar).values()
    assert len(values) == 2
    assert set(values) == {foo, bar}


def test_tagset_union_should_be_commutative(foo: Tag, bar: Tag, baz: Tag, bang: Tag) -> None:
    t1 = TagSet(foo, bar)
    t2 = TagSet(foo, baz, bang)
    union1 = t1.union(t2)
    union2 = t2.union(t1)

    assert union1.size() == 4
    assert union2.size() == 4
    assert union1 == union2
    assert union1 == TagSet(foo, bar, baz, bang)
    assert t1 | t2 == union1


def test_tagset_intersection_should_be_commutative(foo: Tag, bar: Tag, baz: Tag, bang: Tag) -> None:
    t1 = TagSet(foo, bar)
    t2 = TagSet(foo, baz, bang)
    int1 = t1.intersection(t2)
    int2 = t2.intersection(t1)

    assert int1.size() == 1
    assert int2.size() == 1
    assert int1 == int2
    assert int1 == TagSet(foo)
    assert t1 & t2 == int1


def test_tagset_difference_should_be_asymmetric(foo: Tag, bar: Tag, baz: Tag, bang: Tag) -> None:
    t1 = TagSet(foo, bar)
    t2 = TagSet(foo, baz, bang)

    assert t1.difference(t2) == TagSet(bar)
    assert t2.difference(t1) == TagSet(baz, bang)
    assert t2 - t1 == TagSet(baz, bang)


def test_tagset_algebra_should_leave_operands_untouched(foo: Tag, bar: Tag, baz: Tag) -> None:
    t1 = TagSet(foo, bar)
    t2 = TagSet(foo, baz)
    results = [t1.union(t2), t1.intersection(t2), t1.difference(t2)]
    for result in results:
        result.add(parse_tag("machine-7"))
        result.remove(foo)

    assert t1 == TagSet(foo, bar)
    assert t2 == TagSet(foo, baz)


def test_tagset_equality_should_ignore_insertion_order(foo: Tag, bar: Tag) -> None:
    assert TagSet(foo, bar) == TagSet(bar, foo)
    assert TagSet(foo) != TagSet(bar)
    assert TagSet() != [foo]


def test_tagset_should_be_unhashable(foo: Tag) -> None:
    with pytest.raises(TypeError):
        hash(TagSet(foo))


def test_tagset_repr_should_list_sorted_members(foo: Tag, bang: Tag) -> None:
    assert repr(TagSet(foo, bang)) == "TagSet('machine-0', 'unit-wordpress-0')"


def test_uninitialised_tagset_add_should_fail(foo: Tag) -> None:
    tags = _uninitialised()
    with pytest.raises(UninitializedSetError, match="^uninitialised set$"):
        tags.add(foo)
    assert tags.size() == 0


def test_uninitialised_tagset_remove_should_fail(foo: Tag) -> None:
    with pytest.raises(UninitializedSetError, match="^uninitialised set$"):
        _uninitialised().remove(foo)


def test_uninitialised_tagset_error_should_not_be_core_error() -> None:
    assert issubclass(UninitializedSetError, RuntimeError)
    assert not issubclass(UninitializedSetError, CoreError)


def test_uninitialised_tagset_should_read_as_empty(foo: Tag) -> None:
    tags = _uninitialised()
    assert tags.is_empty() is True
    assert tags.contains(foo) is False
    assert tags.sorted_values() == []
    assert tags == TagSet()
    assert tags.union(TagSet(foo)) == TagSet(foo)
