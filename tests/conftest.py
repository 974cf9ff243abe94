"""Shared fixtures for base converter tests."""

import io
import shutil

import pytest
from rich.console import Console

from modules.base_convert.core.radix import ManualStrategy, default_strategy

HAS_BC = shutil.which("bc") is not None
requires_bc = pytest.mark.skipif(not HAS_BC, reason="bc is not installed")


@pytest.fixture
def fresh_strategy():
    """Forget the cached strategy so environment overrides take effect."""
    default_strategy.cache_clear()
    yield
    default_strategy.cache_clear()


@pytest.fixture
def manual() -> ManualStrategy:
    return ManualStrategy()


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=120, color_system=None, highlight=False)


@pytest.fixture
def fake_bc(tmp_path):
    """Write an executable shell script standing in for bc."""

    def _write(body: str):
        script = tmp_path / "bc"
        script.write_text(f"#!/bin/sh\n{body}\n")
        script.chmod(0o755)
        return str(script)

    return _write
