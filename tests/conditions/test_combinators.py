"""Tests for and/or/not conditions."""

from __future__ import annotations

import pytest

from gatewise.conditions import run
from gatewise.conditions.combinators import AndCondition, NotCondition, OrCondition
from gatewise.conditions.factory import ConditionFactory
from gatewise.exceptions import ConditionConfigError

CTX = {"url": "https://example.com/home"}

MATCH = {"type": "url", "pattern": "example"}
NO_MATCH = {"type": "url", "pattern": "nowhere"}


@pytest.mark.asyncio
async def test_empty_and_is_true() -> None:
    assert await run({"type": "and", "conditions": []}, CTX) is True


@pytest.mark.asyncio
async def test_empty_or_is_false() -> None:
    assert await run({"type": "or", "conditions": []}, CTX) is False


@pytest.mark.asyncio
async def test_and_without_conditions_key_is_true() -> None:
    assert await run({"type": "and"}, CTX) is True


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("children", "expected"),
    [
        ([MATCH, MATCH], True),
        ([MATCH, NO_MATCH], False),
        ([NO_MATCH, MATCH], False),
    ],
)
async def test_and_requires_every_child(children: list[dict], expected: bool) -> None:
    assert await run({"type": "and", "conditions": children}, CTX) is expected


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("children", "expected"),
    [
        ([NO_MATCH, MATCH], True),
        ([NO_MATCH, NO_MATCH], False),
    ],
)
async def test_or_requires_any_child(children: list[dict], expected: bool) -> None:
    assert await run({"type": "or", "conditions": children}, CTX) is expected


@pytest.mark.asyncio
@pytest.mark.parametrize("inner", [MATCH, NO_MATCH, {"type": "and", "conditions": []}, {"type": "or"}])
async def test_not_negates_child(inner: dict) -> None:
    assert await run({"type": "not", "condition": inner}, CTX) is (not await run(inner, CTX))


@pytest.mark.asyncio
async def test_not_without_child_is_true() -> None:
    assert await run({"type": "not"}, CTX) is True


@pytest.mark.asyncio
async def test_and_short_circuits_on_first_false(counting_registry) -> None:
    registry, calls = counting_registry
    desc = {
        "type": "and",
        "conditions": [
            {"type": "probe", "label": "first", "result": False},
            {"type": "probe", "label": "second"},
        ],
    }

    assert await run(desc, CTX, registry=registry) is False
    assert calls == ["first"]


@pytest.mark.asyncio
async def test_or_short_circuits_on_first_true(counting_registry) -> None:
    registry, calls = counting_registry
    desc = {
        "type": "or",
        "conditions": [
            {"type": "probe", "label": "first", "result": True},
            {"type": "probe", "label": "second"},
        ],
    }

    assert await run(desc, CTX, registry=registry) is True
    assert calls == ["first"]


def test_factory_builds_children_in_order() -> None:
    factory = ConditionFactory(CTX)
    tree = factory.create({"type": "or", "conditions": [MATCH, {"type": "not", "condition": NO_MATCH}]})

    assert isinstance(tree, OrCondition)
    assert len(tree.conditions) == 2
    assert isinstance(tree.conditions[1], NotCondition)
    assert tree.conditions[1].condition is not None


def test_group_rejects_non_list_conditions() -> None:
    with pytest.raises(ConditionConfigError, match="expects a list"):
        ConditionFactory(CTX).create({"type": "and", "conditions": "nope"})


def test_and_condition_type_is_and() -> None:
    assert isinstance(ConditionFactory(CTX).create({"type": "and"}), AndCondition)
