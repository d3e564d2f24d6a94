"""Context values for the code generator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .ir import MemberMethod, Namespace, Stmt, TypeDeclaration


@dataclass(frozen=True)
class Context:
    """Where the generator is currently emitting.

    One value per nesting level; entering a body pushes a derived copy and
    leaving it pops back, so restoring never depends on the body finishing.

    scope: statement list receiving new statements
    type: type declaration receiving new members
    method: method whose body is being emitted, None at type level
    namespace: namespace receiving imports (and classes in init mode)
    is_init: classes attach to the namespace instead of the current type
    """

    scope: list[Stmt]
    type: TypeDeclaration
    method: MemberMethod | None
    namespace: Namespace
    is_init: bool
