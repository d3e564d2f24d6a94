"""codedom: C# code model and scope-tracking generator, public API."""

from __future__ import annotations

from typing import Callable

from .generator import CodeGenerator as CodeGenerator, UnsupportedOperation as UnsupportedOperation
from .ir import CompileUnit
from .keywords import escape_keyword_name as escape_keyword_name
from .serialize import serialize as serialize


def build_module(
    module_path: str, module_name: str, build: Callable[[CodeGenerator], None]
) -> CompileUnit:
    """Build one module's CompileUnit.

    build receives a fresh generator and drives it; the generator is
    dropped when build returns, so its context never outlives the module.
    """
    unit = CompileUnit()
    build(CodeGenerator(unit, module_path, module_name))
    return unit
