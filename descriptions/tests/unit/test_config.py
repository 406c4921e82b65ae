from __future__ import annotations

import os
from pathlib import Path

import pytest

from descriptions.utils import config
from descriptions.utils.env import load_env


@pytest.mark.parametrize(
    "raw, default, expected",
    [(None, True, True), ("", False, False), ("yes", False, True), ("0", True, False), (" ON ", False, True)],
)
def test_parse_bool(raw, default, expected) -> None:
    assert config._parse_bool(raw, default=default) is expected


def test_load_env_reads_file_without_overriding(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "DESCRIPTIONS_TEST_FROM_FILE=file\nDESCRIPTIONS_TEST_PRESET=file\n", encoding="utf-8"
    )
    monkeypatch.delenv("DESCRIPTIONS_TEST_FROM_FILE", raising=False)
    monkeypatch.setenv("DESCRIPTIONS_TEST_PRESET", "process")

    assert load_env(dotenv_path=env_file, force=True) is True
    assert load_env(dotenv_path=env_file) is False

    assert os.environ["DESCRIPTIONS_TEST_FROM_FILE"] == "file"
    assert os.environ["DESCRIPTIONS_TEST_PRESET"] == "process"
    monkeypatch.delenv("DESCRIPTIONS_TEST_FROM_FILE")
