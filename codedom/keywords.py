"""C# reserved words and identifier escaping."""

from __future__ import annotations

from . import config

# C# reserved words that need escaping with @
CSHARP_RESERVED = frozenset(
    {
        "abstract",
        "as",
        "base",
        "bool",
        "break",
        "byte",
        "case",
        "catch",
        "char",
        "checked",
        "class",
        "const",
        "continue",
        "decimal",
        "default",
        "delegate",
        "do",
        "double",
        "else",
        "enum",
        "event",
        "explicit",
        "extern",
        "false",
        "finally",
        "fixed",
        "float",
        "for",
        "foreach",
        "goto",
        "if",
        "implicit",
        "in",
        "int",
        "interface",
        "internal",
        "is",
        "lock",
        "long",
        "namespace",
        "new",
        "null",
        "object",
        "operator",
        "out",
        "override",
        "params",
        "private",
        "protected",
        "public",
        "readonly",
        "ref",
        "return",
        "sbyte",
        "sealed",
        "short",
        "sizeof",
        "stackalloc",
        "static",
        "string",
        "struct",
        "switch",
        "this",
        "throw",
        "true",
        "try",
        "typeof",
        "uint",
        "ulong",
        "unchecked",
        "unsafe",
        "ushort",
        "using",
        "virtual",
        "void",
        "volatile",
        "while",
    }
)


def name_needs_quoting(name: str) -> bool:
    """True if name collides with a C# reserved word."""
    return name in CSHARP_RESERVED


def escape_keyword_name(name: str) -> str:
    """Escape C# reserved words with the @ prefix.

    Applied once: "class" -> "@class". The result is never a reserved word,
    so escaping it again leaves it unchanged.
    """
    if name_needs_quoting(name):
        return config.ESCAPE_MARKER + name
    return name
