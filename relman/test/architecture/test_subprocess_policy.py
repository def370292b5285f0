from __future__ import annotations

import ast
import os
from pathlib import Path

import pytest

ALLOWLIST = {"platform/process.py"}


def _relman_root() -> Path:
    return Path(__file__).resolve().parents[2]


def _direct_subprocess_calls(tree: ast.AST) -> list[int]:
    lines: list[int] = []
    for node in ast.walk(tree):
        if not isinstance(node, ast.Call):
            continue
        func = node.func
        if not isinstance(func, ast.Attribute):
            continue
        if func.attr not in {"run", "check_output", "Popen", "call"}:
            continue
        if isinstance(func.value, ast.Name) and func.value.id == "subprocess":
            lines.append(node.lineno)
    return lines


def test_direct_subprocess_usage_is_constrained_to_allowlist() -> None:
    if os.getenv("RELMAN_ARCH_CHECKS") != "1":
        pytest.skip("architecture checks are advisory; set RELMAN_ARCH_CHECKS=1 to enable")

    root = _relman_root()
    offenders: list[str] = []
    for path in sorted(root.rglob("*.py")):
        rel = path.relative_to(root)
        if rel.parts[0] == "test" or "__pycache__" in rel.parts:
            continue
        if rel.as_posix() in ALLOWLIST:
            continue
        tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
        for line in _direct_subprocess_calls(tree):
            offenders.append(f"{rel}:{line}: direct subprocess call outside allowlist")

    assert not offenders, "Subprocess policy violations:\n" + "\n".join(offenders)
