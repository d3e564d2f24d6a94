"""codedom IR - C# code model built by the translator.

This module defines the complete set of node kinds the generator produces.
Each node's docstring documents its semantics and invariants.

Architecture:
    Python source -> Translator (driver) -> CodeGenerator -> [IR] -> Renderer -> C#

Nodes hold data and containment only. Every statement and declaration is
owned by exactly one list in exactly one parent; the tree has no cycles.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal


# ============================================================
# TYPE REFERENCES
#
# Type references are hashable values and may be shared
# between nodes; they are values, not tree members.
# ============================================================


@dataclass(unsafe_hash=True)
class TypeRef:
    """Reference to a C# type by name, with optional generic arguments.

    | Python       | TypeRef                               | C#           |
    |--------------|---------------------------------------|--------------|
    | object       | TypeRef("object")                     | object       |
    | list[object] | TypeRef("List", (TypeRef("object"),)) | List<object> |

    Invariants:
    - name is non-empty
    - generic_args is empty for non-generic types
    """

    name: str
    generic_args: tuple[TypeRef, ...] = ()


OBJECT = TypeRef("object")


Visibility = Literal["public", "private", "protected", "internal"]


# ============================================================
# COMPILE UNIT / NAMESPACES
# ============================================================


@dataclass
class CompileUnit:
    """Root of the tree. One per translated module.

    Invariants:
    - Namespaces appear in creation order
    """

    namespaces: list[Namespace] = field(default_factory=list)


@dataclass
class Namespace:
    """A C# namespace: `namespace a.b.c { ... }`

    Invariants:
    - Imports added via ensure_import are unique by namespace string
    - Each TypeDeclaration in types is owned by this namespace only
    """

    name: str
    imports: list[NamespaceImport] = field(default_factory=list)
    types: list[TypeDeclaration] = field(default_factory=list)


@dataclass
class NamespaceImport:
    """A using directive: `using ns;` or `using alias = ns;`

    Both names are already escaped when alias is present.
    """

    namespace: str
    alias: str | None = None


# ============================================================
# ATTRIBUTES
# ============================================================


@dataclass
class AttributeArgument:
    """Positional (name is None) or named argument of a custom attribute."""

    value: Expr
    name: str | None = None


@dataclass
class AttributeDeclaration:
    """Custom attribute: `[Typ(args)]`

    The generator never constructs these (custom_attr is unsupported);
    drivers may attach them to members after construction.
    """

    typ: TypeRef
    args: list[AttributeArgument] = field(default_factory=list)


# ============================================================
# MEMBERS
# ============================================================


@dataclass(kw_only=True)
class Member:
    """Base for type members. Abstract.

    | Field      | C# modifier                        |
    |------------|------------------------------------|
    | visibility | public / private / protected / ... |
    | is_static  | static                             |
    | is_final   | non-virtual (no modifier emitted)  |
    """

    visibility: Visibility = "public"
    is_static: bool = False
    is_final: bool = False
    attributes: list[AttributeDeclaration] = field(default_factory=list)


@dataclass
class TypeDeclaration(Member):
    """Class (or other type) declaration.

    Placement:
    - Owned by exactly one Namespace (types list) or exactly one enclosing
      TypeDeclaration (members list), never both.

    Invariants:
    - base_types are in declaration order
    - members are in creation order
    """

    name: str
    is_class: bool = True
    base_types: list[TypeRef] = field(default_factory=list)
    members: list[Member] = field(default_factory=list)


@dataclass
class MemberField(Member):
    """Field declaration: `public object name = init;`

    If init is None, the field has no initializer.
    """

    name: str
    typ: TypeRef = OBJECT
    init: Expr | None = None


@dataclass
class ParameterDeclaration:
    """Method or constructor parameter: `typ name = default`"""

    typ: TypeRef
    name: str
    default: Expr | None = None


@dataclass
class MemberMethod(Member):
    """Method declaration.

    Invariants:
    - statements is the method body scope; it is the only list that
      receives statements while the method body is being emitted
    """

    name: str
    params: list[ParameterDeclaration] = field(default_factory=list)
    return_type: TypeRef = OBJECT
    statements: list[Stmt] = field(default_factory=list)


@dataclass
class Constructor(MemberMethod):
    """Instance constructor. name is unused (always the enclosing type)."""

    name: str = ""


# ============================================================
# STATEMENTS
# ============================================================


@dataclass(kw_only=True)
class Stmt:
    """Base for all statements. Abstract.

    Every statement is appended to exactly one scope list at creation time.
    """


@dataclass
class Assign(Stmt):
    """Assignment: `target = value;`"""

    target: Expr
    value: Expr


@dataclass
class ExprStmt(Stmt):
    """Expression evaluated for side effects, result discarded."""

    expr: Expr


@dataclass
class If(Stmt):
    """Conditional statement.

    Semantics: evaluate cond; run true_statements if true, else
    false_statements. An empty false_statements means no else branch.
    """

    cond: Expr
    true_statements: list[Stmt] = field(default_factory=list)
    false_statements: list[Stmt] = field(default_factory=list)


@dataclass
class Foreach(Stmt):
    """Iterate over a collection: `foreach (var in iterable) { ... }`

    var is the loop target expression (usually a Var).
    """

    var: Expr
    iterable: Expr
    statements: list[Stmt] = field(default_factory=list)


@dataclass
class While(Stmt):
    """Pre-test loop: `while (test) { body }`"""

    test: Expr
    body: list[Stmt] = field(default_factory=list)


@dataclass
class DoWhile(Stmt):
    """Post-test loop: `do { body } while (test);`"""

    test: Expr
    body: list[Stmt] = field(default_factory=list)


@dataclass
class CatchClause:
    """A catch block: `catch (catch_type local_name) { statements }`

    Owned by exactly one TryCatchFinally once passed to try_.
    """

    local_name: str | None
    catch_type: TypeRef | None
    statements: list[Stmt] = field(default_factory=list)


@dataclass
class TryCatchFinally(Stmt):
    """Exception handling.

    | Part               | C#                  |
    |--------------------|---------------------|
    | try_statements     | try { ... }         |
    | catch_clauses      | catch (...) { ... } |
    | finally_statements | finally { ... }     |

    An empty finally_statements means no finally block.
    """

    try_statements: list[Stmt] = field(default_factory=list)
    catch_clauses: list[CatchClause] = field(default_factory=list)
    finally_statements: list[Stmt] = field(default_factory=list)


@dataclass
class Using(Stmt):
    """Resource block: `using (initializers) { statements }`

    Translated from Python `with`.
    """

    initializers: list[Stmt] = field(default_factory=list)
    statements: list[Stmt] = field(default_factory=list)


@dataclass
class Throw(Stmt):
    """Throw statement. If expr is None, rethrow (`throw;`)."""

    expr: Expr | None = None


@dataclass
class Return(Stmt):
    """Return statement. If expr is None, `return;`"""

    expr: Expr | None = None


@dataclass
class Break(Stmt):
    """Break from the innermost loop. Not checked to be inside a loop."""


@dataclass
class Continue(Stmt):
    """Continue the innermost loop. Not checked to be inside a loop."""


@dataclass
class Yield(Stmt):
    """`yield return expr;`"""

    expr: Expr


@dataclass
class Comment(Stmt):
    """Line comment. text excludes the `//` marker."""

    text: str


# ============================================================
# EXPRESSIONS
# ============================================================


@dataclass(kw_only=True)
class Expr:
    """Base for all expressions. Abstract.

    Expressions are built without side effects on the tree; they become
    part of it when a statement or member that holds them is appended.
    """


@dataclass
class Var(Expr):
    """Variable reference by name."""

    name: str


@dataclass
class Lit(Expr):
    """Primitive constant.

    | Python | C#            |
    |--------|---------------|
    | None   | null          |
    | True   | true          |
    | 1      | 1             |
    | 1.5    | 1.5           |
    | "s"    | "s"           |
    """

    value: int | float | str | bool | None


@dataclass
class FieldRef(Expr):
    """Field access: `target.field_name`"""

    target: Expr
    field_name: str


@dataclass
class BinaryOp(Expr):
    """Binary operation: `left op right`

    op is the C# operator token: + - * / % == != < <= > >= && || & | ^
    << >> is as ??
    """

    left: Expr
    op: str
    right: Expr


@dataclass
class Application(Expr):
    """Call: `fn(args...)`"""

    fn: Expr
    args: list[Expr] = field(default_factory=list)


@dataclass
class ArrayIndexer(Expr):
    """Indexer: `target[indices...]`"""

    target: Expr
    indices: list[Expr] = field(default_factory=list)


@dataclass
class Lambda(Expr):
    """Lambda expression.

    | Form            | C#                        |
    |-----------------|---------------------------|
    | body set        | (args) => body            |
    | statements set  | (args) => { statements }  |

    Invariants:
    - Exactly one of body / statements is not None
    """

    args: list[Expr]
    body: Expr | None = None
    statements: list[Stmt] | None = None


@dataclass
class MethodRef(Expr):
    """Method group reference: `target.method_name`"""

    target: Expr
    method_name: str


@dataclass
class TypeRefExpr(Expr):
    """Type used in expression position: `Console` in `Console.WriteLine`"""

    typ: TypeRef


@dataclass
class ObjectCreate(Expr):
    """Object creation: `new typ(args) { initializers }`"""

    typ: TypeRef
    args: list[Expr] = field(default_factory=list)
    initializers: list[Expr] = field(default_factory=list)
