"""Pytest configuration for codedom test suite."""

import sys
from pathlib import Path

import pytest

# Add repo root to path for codedom imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from codedom.generator import CodeGenerator  # noqa: E402
from codedom.ir import CompileUnit  # noqa: E402


@pytest.fixture
def unit() -> CompileUnit:
    return CompileUnit()


@pytest.fixture
def gen(unit: CompileUnit) -> CodeGenerator:
    """Generator for an ordinary module: classes nest in the module type."""
    return CodeGenerator(unit, "pkg.mod", "mod")


@pytest.fixture
def init_gen(unit: CompileUnit) -> CodeGenerator:
    """Generator for a package initializer: classes go into the namespace."""
    return CodeGenerator(unit, "pkg", "__init__")
