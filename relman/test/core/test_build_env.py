"""Tests for relman.core.build_env module."""

from __future__ import annotations

import os

import pytest

from relman.core.build_env import current_env, with_env


class TestCurrentEnv:
    def test_default_when_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("MIX_ENV", raising=False)
        assert current_env() == "dev"

    def test_reads_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MIX_ENV", "test")
        assert current_env() == "test"

    def test_custom_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ENV", "staging")
        assert current_env("APP_ENV", "local") == "staging"


class TestWithEnv:
    def test_sets_and_restores(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MIX_ENV", "dev")

        with with_env("prod") as env:
            assert env == "prod"
            assert current_env() == "prod"

        assert os.environ["MIX_ENV"] == "dev"

    def test_removes_previously_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("MIX_ENV", raising=False)

        with with_env("prod"):
            assert os.environ["MIX_ENV"] == "prod"

        assert "MIX_ENV" not in os.environ

    def test_restores_when_block_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MIX_ENV", "dev")

        with pytest.raises(RuntimeError):
            with with_env("prod"):
                raise RuntimeError("build exploded")

        assert os.environ["MIX_ENV"] == "dev"

    def test_nested(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MIX_ENV", "dev")

        with with_env("test"):
            with with_env("prod"):
                assert current_env() == "prod"
            assert current_env() == "test"

        assert current_env() == "dev"
