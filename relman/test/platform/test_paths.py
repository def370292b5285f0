"""Tests for relman.platform.paths module."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from relman.platform import paths
from relman.platform.paths import UnsupportedPathType, find_install_root, resolve_real_path


def _make_install(root: Path) -> Path:
    exe = root / "bin" / "elixir"
    exe.parent.mkdir(parents=True)
    exe.write_text("#!/bin/sh\n")
    exe.chmod(0o755)
    return exe


class TestResolveRealPath:
    def test_regular_file_strips_suffix(self, tmp_path: Path) -> None:
        exe = _make_install(tmp_path / "elixir-1.0")
        assert resolve_real_path(str(exe)) == str(tmp_path / "elixir-1.0")

    def test_regular_file_without_suffix_unchanged(self, tmp_path: Path) -> None:
        other = tmp_path / "tool"
        other.write_text("")
        assert resolve_real_path(str(other)) == str(other)

    def test_absolute_symlink(self, tmp_path: Path) -> None:
        exe = _make_install(tmp_path / "opt" / "elixir")
        link_dir = tmp_path / "usr" / "bin"
        link_dir.mkdir(parents=True)
        link = link_dir / "elixir"
        link.symlink_to(exe)

        assert resolve_real_path(str(link)) == str(tmp_path / "opt" / "elixir")

    def test_relative_symlink_resolved_against_link_dir(self, tmp_path: Path) -> None:
        _make_install(tmp_path / "Cellar" / "elixir" / "1.0")
        link_dir = tmp_path / "local" / "bin"
        link_dir.mkdir(parents=True)
        link = link_dir / "elixir"
        os.symlink("../../Cellar/elixir/./1.0/bin/elixir", link)

        assert resolve_real_path(str(link)) == str(tmp_path / "Cellar" / "elixir" / "1.0")

    def test_only_one_level_followed(self, tmp_path: Path) -> None:
        exe = _make_install(tmp_path / "real")
        middle = tmp_path / "middle"
        middle.symlink_to(exe)
        outer = tmp_path / "outer"
        outer.symlink_to(middle)

        assert resolve_real_path(str(outer)) == str(middle)

    def test_custom_suffix(self, tmp_path: Path) -> None:
        exe = tmp_path / "erlang" / "bin" / "erl"
        exe.parent.mkdir(parents=True)
        exe.write_text("")

        assert resolve_real_path(str(exe), suffix="/bin/erl") == str(tmp_path / "erlang")

    def test_directory_unsupported(self, tmp_path: Path) -> None:
        with pytest.raises(UnsupportedPathType) as excinfo:
            resolve_real_path(str(tmp_path))
        assert excinfo.value.path == str(tmp_path)

    def test_missing_path(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            resolve_real_path(str(tmp_path / "nope"))


class TestFindInstallRoot:
    def test_found_on_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        exe = _make_install(tmp_path / "elixir")
        monkeypatch.setattr(paths.shutil, "which", lambda name: str(exe))

        assert find_install_root("elixir") == str(tmp_path / "elixir")

    def test_not_on_path(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(paths.shutil, "which", lambda name: None)
        assert find_install_root("elixir") is None
