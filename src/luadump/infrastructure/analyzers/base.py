"""Base utilities for Lua syntax tree analyzers."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from luaparser import astnodes

from luadump.domain.model.member_kind import MemberKind

# Members named with this prefix are implementation details (__index, __call, ...)
INTERNAL_PREFIX = "__"

_NON_CHILD_ATTRS = frozenset({"comments", "parent"})

# Symbol tokens usable as bracket keys, rendered as written in source
_SYMBOL_KEYS: dict[type[astnodes.Node], str] = {
    astnodes.Nil: "nil",
    astnodes.TrueExpr: "true",
    astnodes.FalseExpr: "false",
    astnodes.Varargs: "...",
}

# Suffixes that apply a call to the chain built so far
_CALL_SUFFIXES = (astnodes.Call, astnodes.Invoke)


def is_internal(name: str) -> bool:
    """Check if member name carries the internal-marker prefix."""
    return name.startswith(INTERNAL_PREFIX)


def first_token(node: astnodes.Node | None) -> Any | None:
    """Source token the parser attached to node, None for synthesized nodes."""
    return getattr(node, "first_token", None)


def is_wrapped(node: astnodes.Node | None) -> bool:
    """Check if expression was written inside parentheses.

    The syntax provider marks `( ... )` with `wrapped = True` on the inner
    expression. Parenthesised expressions are never unwrapped:
    `return (M)` has no shape.
    """
    return getattr(node, "wrapped", False) is True


def member_kind_of(value: astnodes.Node | None) -> MemberKind:
    """Classify assigned expression by syntactic shape only.

    Args:
        value: Right-hand expression, None when a multi-assignment has no match

    Returns:
        FUNCTION for a bare anonymous function literal, VALUE otherwise
    """
    match value:
        case astnodes.AnonymousFunction() if not is_wrapped(value):
            return MemberKind.FUNCTION
    return MemberKind.VALUE


def static_key(key: astnodes.Node) -> str | None:
    """Resolve a bracket key expression to a member name.

    Rules:
        ["name"] → name (quotes stripped)
        [0x10]   → 0x10 (numeric source text)
        [true]   → true (symbol token: nil, true, false, ...)
        [""]     → None (no member name)
        anything else → None (computed keys are skipped)
    """
    if is_wrapped(key):
        return None

    match key:
        case astnodes.String(s=text):
            return text or None
        case astnodes.Number(n=number):
            token = first_token(key)
            return token.text if token is not None else str(number)

    return _SYMBOL_KEYS.get(type(key))


def index_key(index: astnodes.Index) -> str | None:
    """Resolve the member name of one index suffix (`.name` or `[key]`)."""
    if index.notation == astnodes.IndexNotation.DOT:
        match index.idx:
            case astnodes.Name(id=name) if name:
                return name
        return None
    return static_key(index.idx)


def access_chain(target: astnodes.Node) -> tuple[str, tuple[astnodes.Node, ...]] | None:
    """Flatten `base.a["b"]().c` into base name and suffixes in source order.

    Suffixes are Index nodes and call nodes (Call, Invoke); `base:m()`
    contributes a single Invoke suffix.

    Args:
        target: Assignment target or function name expression

    Returns:
        (base name, suffixes) or None when the chain is not rooted at a bare
        name (call of a literal, parenthesised prefix)
    """
    suffixes: list[astnodes.Node] = []
    node = target

    while True:
        match node:
            case astnodes.Index() | astnodes.Name() if is_wrapped(node):
                # (M).x, (M.a).b: an unparenthesised chain starts at the base name
                return None
            case astnodes.Index(value=prefix) | astnodes.Call(func=prefix):
                suffixes.append(node)
                node = prefix
            case astnodes.Invoke(source=prefix):
                suffixes.append(node)
                node = prefix
            case astnodes.Name(id=name):
                return name, tuple(reversed(suffixes))
            case _:
                return None


def is_call(suffix: astnodes.Node) -> bool:
    """Check if chain suffix is a call or method invocation."""
    return isinstance(suffix, _CALL_SUFFIXES)


def walk(root: astnodes.Node) -> Iterator[astnodes.Node]:
    """Walk all nodes depth-first in source order, parents before children.

    Descends into every nested block and function body.
    Explicit stack: deeply nested sources do not hit the recursion limit.

    Example:
        for node in walk(chunk):
            match node:
                case astnodes.Method(name=astnodes.Name(id=name)):
                    print(f"method {name}")
    """
    stack: list[astnodes.Node] = [root]

    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(list(iter_child_nodes(node))))


def iter_child_nodes(node: astnodes.Node) -> Iterator[astnodes.Node]:
    """Yield direct child nodes in attribute definition order.

    Private attributes (tokens, cached line info), comments and parent
    back-references are skipped.
    """
    for attr, value in vars(node).items():
        if attr.startswith("_") or attr in _NON_CHILD_ATTRS:
            continue
        if isinstance(value, astnodes.Node):
            yield value
        elif isinstance(value, list):
            yield from (item for item in value if isinstance(item, astnodes.Node))
