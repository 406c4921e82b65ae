from __future__ import annotations

import logging
from typing import List

import pytest

from descriptions import api
from descriptions.api import describe
from descriptions.registry import DeprecationData, ModelVersion, ResourceRegistration
from descriptions.text import StandardResourceDescriptionResolver
from descriptions.tests.fixtures.sample_model import (
    SERVER_TEXTS,
    RecordingResolver,
    build_server_model,
)
from descriptions.utils import config
from descriptions.utils.errors import DescriptionContractError


def _server_resolver() -> StandardResourceDescriptionResolver:
    return StandardResourceDescriptionResolver("server", "server", bundles=SERVER_TEXTS)


def test_describe_returns_ok_envelope() -> None:
    result = describe(build_server_model(), _server_resolver(), "fr", address="/server=main")

    assert result["ok"] is True
    assert result["errors"] == []
    data = result["data"]
    assert data["description"] == "Une instance de serveur"
    assert data["attributes"]["port"]["description"] == "Port d'écoute"
    assert data["attributes"]["name"]["description"] == "Server name"
    assert data["attributes"]["threads"] == {}
    assert data["capabilities"] == [{"name": "org.example.server", "dynamic": True}]


def test_describe_uses_configured_default_locale(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "DEFAULT_LOCALE", "de-AT")
    resolver = RecordingResolver()

    result = describe(ResourceRegistration.root(), resolver)

    assert result["ok"] is True
    assert resolver.bundle_requests == ["de_AT"]
    assert result["data"]["description"] == "de_AT:resource"


def test_describe_unknown_address_is_not_found() -> None:
    result = describe(build_server_model(), RecordingResolver(), "en", address="/nope=x")

    assert result["ok"] is False
    assert result["data"] is None
    assert result["errors"][0]["code"] == "NOT_FOUND"
    assert result["errors"][0]["status"] == 404
    assert "/nope=x" in result["errors"][0]["message"]


def test_describe_invalid_address_is_rejected() -> None:
    result = describe(build_server_model(), RecordingResolver(), "en", address="/=x")

    assert result["ok"] is False
    assert result["errors"][0]["code"] == "INVALID_REQUEST"


def test_missing_text_yields_error_without_partial_document() -> None:
    resolver = StandardResourceDescriptionResolver("server", "server", bundles={"": {"server": "x"}})

    result = describe(build_server_model(), resolver, "en", address="/server=*")

    assert result["ok"] is False
    assert result["data"] is None
    assert result["errors"][0]["code"] == "TEXT_UNAVAILABLE"


def test_deprecation_is_passed_to_provider() -> None:
    result = describe(
        build_server_model(),
        _server_resolver(),
        "en",
        address="/server=*",
        deprecation=DeprecationData(ModelVersion(3)),
    )

    assert result["data"]["deprecated"] == {
        "since": "3.0.0",
        "reason": "Use the host model instead",
    }


def test_contract_violation_is_reported(monkeypatch: pytest.MonkeyPatch) -> None:
    def reject(document):
        raise DescriptionContractError("resource_description.v1.json", ["bad field"])

    monkeypatch.setattr(api, "ensure_valid_description", reject)

    result = describe(ResourceRegistration.root(), RecordingResolver(), "en", validate=True)

    assert result["ok"] is False
    assert result["errors"][0]["code"] == "CONTRACT_VIOLATION"
    assert "bad field" in result["errors"][0]["message"]


def test_validation_follows_configuration(monkeypatch: pytest.MonkeyPatch) -> None:
    checked: List[dict] = []
    monkeypatch.setattr(api, "ensure_valid_description", lambda document: checked.append(document))

    monkeypatch.setattr(config, "VALIDATE_OUTPUT", False)
    describe(ResourceRegistration.root(), RecordingResolver(), "en")
    assert checked == []

    monkeypatch.setattr(config, "VALIDATE_OUTPUT", True)
    describe(ResourceRegistration.root(), RecordingResolver(), "en")
    assert len(checked) == 1


class _BrokenResolver(RecordingResolver):
    def get_resource_bundle(self, locale):
        raise RuntimeError("boom")


def test_unexpected_failures_are_logged_and_reported(caplog: pytest.LogCaptureFixture) -> None:
    resolver = _BrokenResolver()

    with caplog.at_level(logging.ERROR, logger="descriptions.describe"):
        result = describe(ResourceRegistration.root(), resolver, "en")

    assert result["ok"] is False
    assert result["data"] is None
    assert result["errors"][0]["code"] == "INTERNAL"
    assert result["errors"][0]["message"] == "RuntimeError: boom"
    assert any(record.getMessage() == "describe.error" for record in caplog.records)
