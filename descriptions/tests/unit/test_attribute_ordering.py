"""Ordering of attribute descriptions by group and name."""
from __future__ import annotations

import random

import pytest

from descriptions.attributes import AttributeDefinition
from descriptions.provider import AttributeSortKey, DefaultResourceDescriptionProvider
from descriptions.registry import ResourceRegistration
from descriptions.text import NonResolvingResourceDescriptionResolver
from descriptions.utils import config

_DEFINITIONS = [
    AttributeDefinition("zeta"),
    AttributeDefinition("alpha"),
    AttributeDefinition("mid", group="b-group"),
    AttributeDefinition("first", group="b-group"),
    AttributeDefinition("only", group="a-group"),
    AttributeDefinition("Upper"),
]


def _registration(definitions) -> ResourceRegistration:
    root = ResourceRegistration.root()
    for definition in definitions:
        root.register_attribute(definition)
    return root


def _attribute_order(groupless_first=None, seed: int = 0):
    definitions = list(_DEFINITIONS)
    random.Random(seed).shuffle(definitions)
    provider = DefaultResourceDescriptionProvider(
        _registration(definitions),
        NonResolvingResourceDescriptionResolver(),
        groupless_first=groupless_first,
    )
    return list(provider.get_model_description("en")["attributes"])


@pytest.mark.parametrize("seed", range(5))
def test_order_is_independent_of_registration_order(seed: int) -> None:
    assert _attribute_order(True, seed) == ["Upper", "alpha", "zeta", "only", "first", "mid"]


def test_groupless_last_when_disabled() -> None:
    assert _attribute_order(False) == ["only", "first", "mid", "Upper", "alpha", "zeta"]


def test_default_follows_configuration(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "GROUPLESS_FIRST", False)

    assert _attribute_order() == ["only", "first", "mid", "Upper", "alpha", "zeta"]


def test_sort_key_orders_absent_group_first() -> None:
    keys = [
        AttributeSortKey("b", "g1"),
        AttributeSortKey("a", "g1"),
        AttributeSortKey("c"),
        AttributeSortKey("a", "g0"),
    ]

    ordered = sorted(keys, key=lambda key: key.sort_key())

    assert ordered == [
        AttributeSortKey("c"),
        AttributeSortKey("a", "g0"),
        AttributeSortKey("a", "g1"),
        AttributeSortKey("b", "g1"),
    ]


def test_sort_key_from_definition() -> None:
    definition = AttributeDefinition("port", group="network")

    assert AttributeSortKey.of(definition) == AttributeSortKey("port", "network")
