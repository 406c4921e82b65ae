from __future__ import annotations

import pytest

from descriptions.attributes import AttributeDefinition, ModelType
from descriptions.registry import DeprecationData, ModelVersion
from descriptions.tests.fixtures.sample_model import RecordingResolver


def test_description_written_under_attributes_path() -> None:
    definition = AttributeDefinition("name", required=True, default="srv")
    scratch: dict = {}

    returned = definition.add_resource_attribute_description(scratch, RecordingResolver(), "en", None)

    assert scratch["attributes"]["name"] is returned
    assert returned == {
        "type": "STRING",
        "description": "en:attr.name",
        "expressionsAllowed": False,
        "required": True,
        "nillable": False,
        "default": "srv",
    }


def test_existing_attributes_are_kept() -> None:
    scratch = {"attributes": {"other": {}}}

    AttributeDefinition("name").add_resource_attribute_description(scratch, RecordingResolver(), "en", None)

    assert list(scratch["attributes"]) == ["other", "name"]


def test_numeric_and_sized_bounds_depend_on_type() -> None:
    number = AttributeDefinition("n", ModelType.INT, min=1, max=10, min_length=2)
    text = AttributeDefinition("s", ModelType.STRING, min=1, min_length=2, max_length=8)
    resolver = RecordingResolver()

    number_doc = number.add_resource_attribute_description({}, resolver, "en", None)
    text_doc = text.add_resource_attribute_description({}, resolver, "en", None)

    assert (number_doc["min"], number_doc["max"]) == (1, 10)
    assert "minLength" not in number_doc
    assert (text_doc["minLength"], text_doc["maxLength"]) == (2, 8)
    assert "min" not in text_doc


def test_optional_fields() -> None:
    definition = AttributeDefinition(
        "mode",
        allowed_values=["fast", "safe"],
        measurement_unit="seconds",
        allow_expression=True,
        nillable=False,
        group="tuning",
        deprecated=DeprecationData(ModelVersion(1, 4)),
    )

    doc = definition.add_resource_attribute_description({}, RecordingResolver(), "de", None)

    assert doc["allowed"] == ["fast", "safe"]
    assert doc["unit"] == "seconds"
    assert doc["expressionsAllowed"] is True
    assert doc["nillable"] is False
    assert doc["attributeGroup"] == "tuning"
    assert doc["deprecated"] == {"since": "1.4.0", "reason": "de:attr.mode.deprecated"}


def test_type_given_as_text_is_coerced() -> None:
    assert AttributeDefinition("flag", "boolean").type is ModelType.BOOLEAN


@pytest.mark.parametrize(
    "kwargs",
    [
        {"name": ""},
        {"name": "x", "group": " "},
        {"name": "x", "min": 5, "max": 1},
    ],
)
def test_invalid_definitions_rejected(kwargs) -> None:
    with pytest.raises(ValueError):
        AttributeDefinition(**kwargs)
