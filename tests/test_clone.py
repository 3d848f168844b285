import datetime
import logging
from collections import OrderedDict, defaultdict, namedtuple
from decimal import Decimal
from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st

from objectutil.cloning import ValueCategory, categorize, clone


_JSON_SCALARS = st.none() | st.booleans() | st.integers(min_value=-10_000, max_value=10_000) | st.text(max_size=30)
_JSON_VALUES = st.recursive(
    _JSON_SCALARS,
    lambda children: st.lists(children, max_size=4) | st.dictionaries(st.text(max_size=12), children, max_size=4),
    max_leaves=15,
)
_CONTAINERS = st.lists(_JSON_VALUES, max_size=4) | st.dictionaries(st.text(max_size=12), _JSON_VALUES, max_size=4)


class TaggedList(list):
    """List that accepts extra named attributes."""


Point = namedtuple("Point", ["x", "y"])


def _mutate_everything(value: Any) -> None:
    if isinstance(value, dict):
        for key in list(value):
            _mutate_everything(value[key])
        value["__mutated__"] = True
    elif isinstance(value, list):
        for item in value:
            _mutate_everything(item)
        value.append("__mutated__")


@given(value=_CONTAINERS)
def test_clone_is_structurally_equal(value: Any) -> None:
    assert clone(value) == value


@given(value=_CONTAINERS)
def test_mutating_clone_leaves_original_untouched(value: Any) -> None:
    control = clone(value)
    cloned = clone(value)
    _mutate_everything(cloned)
    assert value == control


@given(value=_CONTAINERS)
def test_mutating_original_leaves_clone_untouched(value: Any) -> None:
    cloned = clone(value)
    control = clone(value)
    _mutate_everything(value)
    assert cloned == control


def test_modifying_cloned_list_with_extra_attribute_does_not_affect_original() -> None:
    original = TaggedList(["1", {"foo": "bar"}, "3"])
    original.foo = "bar"
    control = clone(original)

    cloned = clone(original)
    cloned[0] = "2"
    cloned[1]["foo"] = "baz"
    _ = cloned.pop()
    cloned.foo = "baz"

    assert original == control == ["1", {"foo": "bar"}, "3"]
    assert original.foo == control.foo == "bar"
    assert isinstance(control, TaggedList)


def test_extra_attributes_on_list_are_cloned_deeply() -> None:
    original = TaggedList([1])
    original.meta = {"tags": ["a"]}

    cloned = clone(original)
    cloned.meta["tags"].append("b")

    assert original.meta == {"tags": ["a"]}
    assert cloned.meta == {"tags": ["a", "b"]}


def test_modifying_cloned_dict_does_not_affect_original() -> None:
    original = {"foo": "bar", "nested": {"foo": "bar"}}
    cloned = clone(original)
    cloned["foo"] = "baz"
    cloned["nested"]["foo"] = "baz"

    assert original == {"foo": "bar", "nested": {"foo": "bar"}}


def test_clone_keeps_dict_subclass_type_and_state() -> None:
    ordered = OrderedDict([("b", [1]), ("a", [2])])
    counts: defaultdict[str, list[int]] = defaultdict(list, {"x": [1]})

    cloned_ordered = clone(ordered)
    cloned_counts = clone(counts)

    assert isinstance(cloned_ordered, OrderedDict)
    assert list(cloned_ordered) == ["b", "a"]
    assert cloned_ordered["b"] is not ordered["b"]
    assert isinstance(cloned_counts, defaultdict)
    assert cloned_counts["missing"] == []
    assert "missing" not in counts
    assert cloned_counts["x"] is not counts["x"]


def test_clone_tuples_and_named_tuples() -> None:
    original = ([1], Point(x=[2], y=3))
    cloned = clone(original)

    assert cloned == original
    assert isinstance(cloned[1], Point)
    assert cloned[0] is not original[0]
    assert cloned[1].x is not original[1].x


def test_cloned_function_behaves_like_original() -> None:
    def greet(name: str, punctuation: str = "!") -> str:
        return f"hello {name}{punctuation}"

    original = {"greet": greet, "foo": lambda: "bar"}
    cloned = clone(original)

    assert cloned["foo"]() == "bar"
    assert cloned["greet"]("world") == "hello world!"
    assert cloned["greet"] is not greet
    assert cloned["greet"].__name__ == "greet"


def test_cloned_closure_shares_no_new_state() -> None:
    counter = {"calls": 0}

    def bump() -> int:
        counter["calls"] += 1
        return counter["calls"]

    assert clone(bump)() == 1
    assert bump() == 2


def test_non_function_callables_are_returned_as_is() -> None:
    assert clone(len) is len
    assert clone(dict) is dict


@pytest.mark.parametrize(
    "value",
    [
        datetime.datetime(2024, 5, 17, 12, 30, 15, 123, tzinfo=datetime.UTC),
        datetime.datetime(2024, 5, 17, 12, 30),
        datetime.date(2024, 5, 17),
        datetime.time(23, 59, 1),
    ],
)
def test_cloned_timestamp_is_distinct_but_equal(value: datetime.date | datetime.time) -> None:
    cloned = clone(value)
    assert cloned == value
    assert cloned is not value
    assert type(cloned) is type(value)


@pytest.mark.parametrize("value", ["foobar", b"raw", 1, 1.5, Decimal("2.5"), True, None])
def test_scalars_are_returned_as_is(value: Any) -> None:
    assert clone(value) is value


@pytest.mark.parametrize(
    ("value", "category"),
    [
        (None, ValueCategory.ABSENT),
        (False, ValueCategory.BOOLEAN),
        (3, ValueCategory.NUMBER),
        ("s", ValueCategory.STRING),
        (datetime.date(2020, 1, 1), ValueCategory.TIMESTAMP),
        ({}, ValueCategory.MAPPING),
        ([], ValueCategory.SEQUENCE),
        ((), ValueCategory.SEQUENCE),
        (print, ValueCategory.CALLABLE),
        ({1, 2}, ValueCategory.UNKNOWN),
        (object(), ValueCategory.UNKNOWN),
    ],
)
def test_categorize(value: Any, category: ValueCategory) -> None:
    assert categorize(value) is category


def test_unknown_category_is_logged_and_returned_unchanged(caplog: pytest.LogCaptureFixture) -> None:
    marker = object()
    with caplog.at_level(logging.WARNING, logger="objectutil.cloning.engine"):
        assert clone({"marker": marker})["marker"] is marker

    assert "Unhandled input type 'object'" in caplog.text


def test_extra_attributes_on_dict_subclass_are_cloned_deeply() -> None:
    class TaggedDict(dict):
        """Dict that accepts extra named attributes."""

    original = TaggedDict(a=[1])
    original.meta = {"k": [1]}

    cloned = clone(original)
    cloned.meta["k"].append(2)
    cloned["a"].append(2)

    assert isinstance(cloned, TaggedDict)
    assert original.meta == {"k": [1]}
    assert original == {"a": [1]}
