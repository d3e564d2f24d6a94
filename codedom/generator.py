"""Scope-tracking builder for the C# code model.

The translator drives a CodeGenerator with one call per construct, in the
order the code should appear. Constructs with a body take a no-argument
callback; while it runs, new statements go into that body. Context is kept
on a push/pop stack and restored in a finally block, so a failing callback
leaves the generator where it was before the call.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import replace
from typing import Callable, Iterable, Iterator, NoReturn, TypeVar

from . import config
from .context import Context
from .ir import (
    OBJECT,
    Application,
    ArrayIndexer,
    Assign,
    AttributeArgument,
    BinaryOp,
    Break,
    CatchClause,
    Comment,
    CompileUnit,
    Constructor,
    Continue,
    DoWhile,
    Expr,
    ExprStmt,
    FieldRef,
    Foreach,
    If,
    Lambda,
    MemberField,
    MemberMethod,
    MethodRef,
    Namespace,
    NamespaceImport,
    ObjectCreate,
    ParameterDeclaration,
    Return,
    Stmt,
    Throw,
    TryCatchFinally,
    TypeDeclaration,
    TypeRef,
    TypeRefExpr,
    Using,
    While,
    Yield,
)
from .keywords import escape_keyword_name

logger = logging.getLogger(__name__)

Body = Callable[[], None]
S = TypeVar("S", bound=Stmt)


class UnsupportedOperation(NotImplementedError):
    """Raised by generator operations that are reachable but not supported."""

    def __init__(self, op: str):
        self.op: str = op
        super().__init__(op + " is not supported")


class CodeGenerator:
    """Builds one module's CompileUnit from a sequence of calls."""

    def __init__(self, unit: CompileUnit, module_path: str, module_name: str) -> None:
        self.unit: CompileUnit = unit
        # Statements emitted outside any body; not part of the tree.
        self.module_statements: list[Stmt] = []
        namespace = Namespace(module_path)
        module_type = TypeDeclaration(module_name, is_static=True)
        namespace.types.append(module_type)
        unit.namespaces.append(namespace)
        self._stack: list[Context] = [
            Context(
                scope=self.module_statements,
                type=module_type,
                method=None,
                namespace=namespace,
                is_init=module_name == config.INIT_MODULE_NAME,
            )
        ]

    # --- Context ---

    @property
    def context(self) -> Context:
        return self._stack[-1]

    @property
    def scope(self) -> list[Stmt]:
        return self._stack[-1].scope

    @property
    def current_type(self) -> TypeDeclaration:
        return self._stack[-1].type

    @property
    def current_method(self) -> MemberMethod | None:
        return self._stack[-1].method

    @property
    def current_namespace(self) -> Namespace:
        return self._stack[-1].namespace

    @property
    def is_init(self) -> bool:
        return self._stack[-1].is_init

    @contextmanager
    def _enter(self, **changes: object) -> Iterator[Context]:
        """Push a context derived from the current one; pop it on any exit."""
        ctx = replace(self._stack[-1], **changes)
        self._stack.append(ctx)
        try:
            yield ctx
        finally:
            self._stack.pop()

    def _emit(self, scope: list[Stmt], body: Body | None) -> None:
        """Run body with scope as the current statement list."""
        if body is None:
            return
        with self._enter(scope=scope):
            body()

    def _append(self, stmt: S) -> S:
        self.scope.append(stmt)
        return stmt

    # --- Declarations ---

    def class_(self, name: str, base_classes: Iterable[str], body: Body) -> TypeDeclaration:
        c = TypeDeclaration(name, base_types=[TypeRef(b) for b in base_classes])
        # Classes in __init__ modules go directly into the namespace.
        if self.is_init:
            logger.debug("class %s -> namespace %s", name, self.current_namespace.name)
            self.current_namespace.types.append(c)
        else:
            logger.debug("class %s -> member of %s", name, self.current_type.name)
            self.current_type.members.append(c)
        with self._enter(type=c, method=None, is_init=False):
            body()
        return c

    def method(
        self, name: str, params: Iterable[ParameterDeclaration], body: Body
    ) -> MemberMethod:
        m = MemberMethod(name, params=list(params), return_type=OBJECT)
        self.current_type.members.append(m)
        self._method_body(m, body)
        return m

    def static_method(
        self, name: str, params: Iterable[ParameterDeclaration], body: Body
    ) -> MemberMethod:
        m = MemberMethod(name, params=list(params), return_type=OBJECT, is_static=True)
        self.current_type.members.append(m)
        self._method_body(m, body)
        return m

    def constructor(self, params: Iterable[ParameterDeclaration], body: Body) -> Constructor:
        c = Constructor(params=list(params), is_final=True)
        self.current_type.members.append(c)
        self._method_body(c, body)
        return c

    def lambda_method(self, params: Iterable[ParameterDeclaration], body: Body) -> MemberMethod:
        """Build a detached method; its statements become a lambda body."""
        m = MemberMethod("", params=list(params))
        self._method_body(m, body)
        return m

    def _method_body(self, method: MemberMethod, body: Body) -> None:
        with self._enter(scope=method.statements, method=method):
            body()

    def field(self, name: str, initializer: Expr | None = None) -> MemberField:
        f = MemberField(name, typ=OBJECT, init=initializer)
        self.current_type.members.append(f)
        return f

    def param(self, typ: TypeRef, name: str, default: Expr | None = None) -> ParameterDeclaration:
        return ParameterDeclaration(typ, name, default)

    def custom_attr(self, typ: TypeRef, *args: AttributeArgument) -> NoReturn:
        logger.warning("custom attribute %s requested; not supported", typ.name)
        raise UnsupportedOperation("custom_attr")

    # --- Imports ---

    def using(self, namespace: str) -> NamespaceImport:
        imp = NamespaceImport(namespace)
        self.current_namespace.imports.append(imp)
        return imp

    def using_alias(self, alias: str, namespace: str) -> NamespaceImport:
        imp = NamespaceImport(escape_keyword_name(namespace), alias=escape_keyword_name(alias))
        self.current_namespace.imports.append(imp)
        return imp

    def ensure_import(self, namespace: str) -> NamespaceImport:
        for imp in self.current_namespace.imports:
            if imp.alias is None and imp.namespace == namespace:
                return imp
        logger.debug("import %s into %s", namespace, self.current_namespace.name)
        return self.using(namespace)

    def escape_keyword_name(self, name: str) -> str:
        return escape_keyword_name(name)

    # --- Statements with bodies ---

    def if_(self, test: Expr, xlat_then: Body, xlat_else: Body | None = None) -> If:
        i = If(test)
        self._append(i)
        self._emit(i.true_statements, xlat_then)
        self._emit(i.false_statements, xlat_else)
        return i

    def foreach(self, var: Expr, iterable: Expr, xlat_body: Body) -> Foreach:
        f = Foreach(var, iterable)
        self._append(f)
        self._emit(f.statements, xlat_body)
        return f

    def while_(self, test: Expr, xlat_body: Body) -> While:
        w = While(test)
        self._append(w)
        self._emit(w.body, xlat_body)
        return w

    def do_while(self, xlat_body: Body, test: Expr) -> DoWhile:
        dw = DoWhile(test)
        self._append(dw)
        self._emit(dw.body, xlat_body)
        return dw

    def catch_clause(
        self, local_name: str | None, catch_type: TypeRef | None, xlat_body: Body
    ) -> CatchClause:
        """Build a catch clause for a later try_; it is not appended anywhere."""
        clause = CatchClause(local_name, catch_type)
        self._emit(clause.statements, xlat_body)
        return clause

    def try_(
        self,
        xlat_try: Body,
        catch_clauses: Iterable[CatchClause],
        xlat_finally: Body | None = None,
    ) -> TryCatchFinally:
        t = TryCatchFinally()
        self._append(t)
        self._emit(t.try_statements, xlat_try)
        t.catch_clauses.extend(catch_clauses)
        self._emit(t.finally_statements, xlat_finally)
        return t

    def using_block(self, initializers: Iterable[Stmt], xlat_body: Body) -> Using:
        u = Using(initializers=list(initializers))
        self._append(u)
        self._emit(u.statements, xlat_body)
        return u

    # --- Leaf statements ---

    def assign(self, lhs: Expr, rhs: Expr) -> Assign:
        return self._append(Assign(lhs, rhs))

    def side_effect(self, exp: Expr) -> ExprStmt:
        return self._append(ExprStmt(exp))

    def throw(self, exp: Expr | None = None) -> Throw:
        return self._append(Throw(exp))

    def return_(self, exp: Expr | None = None) -> Return:
        return self._append(Return(exp))

    def break_(self) -> Break:
        return self._append(Break())

    def continue_(self) -> Continue:
        return self._append(Continue())

    def yield_(self, exp: Expr) -> Yield:
        return self._append(Yield(exp))

    def comment(self, text: str) -> Comment:
        return self._append(Comment(text))

    # --- Expressions ---

    def access(self, exp: Expr, field_name: str) -> FieldRef:
        return FieldRef(exp, field_name)

    def bin_op(self, left: Expr, op: str, right: Expr) -> BinaryOp:
        return BinaryOp(left, op, right)

    def appl(self, fn: Expr, *args: Expr) -> Application:
        return Application(fn, list(args))

    def aref(self, exp: Expr, indices: Iterable[Expr]) -> ArrayIndexer:
        return ArrayIndexer(exp, list(indices))

    def lambda_(self, args: Iterable[Expr], body: Expr | list[Stmt]) -> Lambda:
        """Expression lambda, or statement lambda when body is a statement list."""
        if isinstance(body, list):
            return Lambda(list(args), statements=body)
        return Lambda(list(args), body=body)

    def method_ref(self, exp: Expr, method_name: str) -> MethodRef:
        return MethodRef(exp, method_name)

    def type_ref(self, type_name: str, *generic_args: str) -> TypeRef:
        return TypeRef(type_name, tuple(TypeRef(ga) for ga in generic_args))

    def type_ref_expr(self, type_name: str) -> TypeRefExpr:
        return TypeRefExpr(TypeRef(type_name))

    def list_initializer(self, exprs: Iterable[Expr]) -> ObjectCreate:
        lst = ObjectCreate(
            TypeRef(config.LIST_TYPE_NAME, (TypeRef(config.OBJECT_TYPE_NAME),)),
            initializers=list(exprs),
        )
        self.ensure_import(config.COLLECTIONS_NAMESPACE)
        return lst
