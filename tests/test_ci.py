# Copyright 2026 Chainparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the local CI driver in tools/ci.py."""

import importlib.util
from pathlib import Path
from types import ModuleType

import pytest

pytest.importorskip("yachalk")

_CI_PATH = Path(__file__).parent.parent / "tools" / "ci.py"


@pytest.fixture
def ci() -> ModuleType:
    spec = importlib.util.spec_from_file_location("ci", _CI_PATH)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def ran(ci: ModuleType, monkeypatch: pytest.MonkeyPatch) -> list[str]:
    """Record the steps main() runs instead of running them."""
    names: list[str] = []

    def fake_run_step(name: str, cmd: list[str]) -> tuple[bool, float]:
        names.append(name)
        return name != "lint", 0.0

    monkeypatch.setattr(ci, "_run_step", fake_run_step)
    return names


def test_type_check_step(ci: ModuleType) -> None:
    """The type check runs ty over the package sources."""
    assert ci.STEPS["typecheck"] == ["uv", "run", "ty", "check", "src/"]


def test_all_steps_run_in_order(ci: ModuleType, ran: list[str]) -> None:
    """Without arguments every step runs, and a failing step fails the run."""
    assert ci.main([]) == 1
    assert ran == ["format", "lint", "typecheck", "tests", "build"]


def test_selected_steps(ci: ModuleType, ran: list[str]) -> None:
    """Only the named steps run."""
    assert ci.main(["typecheck", "tests"]) == 0
    assert ran == ["typecheck", "tests"]


def test_fail_fast(ci: ModuleType, ran: list[str]) -> None:
    """--fail-fast stops after the first failing step."""
    assert ci.main(["--fail-fast"]) == 1
    assert ran == ["format", "lint"]


def test_unknown_step(ci: ModuleType) -> None:
    """Unknown step names are rejected."""
    with pytest.raises(SystemExit):
        ci.main(["deploy"])
