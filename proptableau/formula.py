from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from .errors import ParseError, ParseErrorKind


# ============================================================
#                      CONNECTIVE SYMBOLS
# ============================================================
NEGATION = '-'
AND = '^'
OR = '|'
IMPLIES = '->'
IFF = '<->'


# ============================================================
#                           AST NODES
# ============================================================

class _Node:
    """
    Common behaviour of every formula node.

    Each node stores its hash, computed once from its children's stored
    hashes. Equality and str() walk an explicit stack, so neither depends
    on the interpreter's recursion limit.
    """
    kind: ClassVar[str] = ''

    def _seal(self, *key) -> None:
        object.__setattr__(self, '_hash', hash((self.kind,) + key))

    def children(self) -> tuple:
        return ()

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other) -> bool:
        if not isinstance(other, _Node):
            return NotImplemented
        stack = [(self, other)]
        while stack:
            x, y = stack.pop()
            if x is y:
                continue
            if type(x) is not type(y) or x._hash != y._hash:
                return False
            if x.kind == 'var':
                if x.name != y.name:
                    return False
                continue
            stack.extend(zip(x.children(), y.children()))
        return True

    def __str__(self) -> str:
        out = []
        stack = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                out.append(item)
            elif item.kind == 'var':
                out.append(item.name)
            elif item.kind == 'not':
                out.append(NEGATION)
                stack.append(item.sub)
            else:
                out.append('(')
                stack.extend((')', item.right, item.symbol, item.left))
        return ''.join(out)


@dataclass(frozen=True, eq=False)
class Var(_Node):
    kind: ClassVar[str] = 'var'
    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ParseError(ParseErrorKind.EMPTY_VARIABLE_NAME)
        for i, ch in enumerate(self.name):
            legal = ch.isascii() and (ch.isalpha() if i == 0 else ch.isalnum())
            if not legal:
                raise ParseError(ParseErrorKind.UNEXPECTED_CHARACTER, i, ch)
        self._seal(self.name)


@dataclass(frozen=True, eq=False)
class Not(_Node):
    kind: ClassVar[str] = 'not'
    sub: Formula

    def __post_init__(self) -> None:
        self._seal(hash(self.sub))

    def children(self) -> tuple:
        return (self.sub,)


@dataclass(frozen=True, eq=False)
class _Binary(_Node):
    symbol: ClassVar[str] = ''
    left: Formula
    right: Formula

    def __post_init__(self) -> None:
        self._seal(hash(self.left), hash(self.right))

    def children(self) -> tuple:
        return (self.left, self.right)


@dataclass(frozen=True, eq=False)
class And(_Binary):
    kind: ClassVar[str] = 'and'
    symbol: ClassVar[str] = AND


@dataclass(frozen=True, eq=False)
class Or(_Binary):
    kind: ClassVar[str] = 'or'
    symbol: ClassVar[str] = OR


@dataclass(frozen=True, eq=False)
class Implies(_Binary):
    kind: ClassVar[str] = 'implies'
    symbol: ClassVar[str] = IMPLIES


@dataclass(frozen=True, eq=False)
class Iff(_Binary):
    kind: ClassVar[str] = 'iff'
    symbol: ClassVar[str] = IFF


Formula = Union[Var, Not, And, Or, Implies, Iff]

BINARY_CONNECTIVES: dict[str, type[_Binary]] = {
    AND: And,
    OR: Or,
    IMPLIES: Implies,
    IFF: Iff,
}


# ============================================================
#                           HELPERS
# ============================================================

def is_atom(f: Formula) -> bool:
    return f.kind == 'var'

def is_literal(f: Formula) -> bool:
    return is_atom(f) or (f.kind == 'not' and is_atom(f.sub))

def size(f: Formula) -> int:
    """Number of nodes in the tree."""
    n = 0
    stack = [f]
    while stack:
        node = stack.pop()
        n += 1
        if node.kind == 'not':
            stack.append(node.sub)
        elif node.kind != 'var':
            stack.extend((node.right, node.left))
    return n

def variables(f: Formula) -> list[str]:
    """Variable names in order of first appearance, left to right."""
    seen: dict[str, None] = {}
    stack = [f]
    while stack:
        node = stack.pop()
        if node.kind == 'var':
            seen.setdefault(node.name)
        elif node.kind == 'not':
            stack.append(node.sub)
        else:
            stack.extend((node.right, node.left))
    return list(seen)

def evaluate(f: Formula, assignment: dict[str, bool]) -> bool:
    """
    Truth value of f under assignment.

    Raises KeyError if a variable of f is missing from assignment.
    """
    kind = f.kind
    if kind == 'var':
        return assignment[f.name]
    if kind == 'not':
        return not evaluate(f.sub, assignment)

    left = evaluate(f.left, assignment)
    right = evaluate(f.right, assignment)
    if kind == 'and':
        return left and right
    if kind == 'or':
        return left or right
    if kind == 'implies':
        return (not left) or right
    return left == right
