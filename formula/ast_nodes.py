# formula/ast_nodes.py
# This file is part of propcalc - A propositional formula evaluator
#
# Abstract Syntax Tree node classes for propositional formula representation

"""AST node classes for representing parsed propositional formulas.

This module defines immutable and hashable node classes used to build tree
representations of propositional formulas whose atoms have already been
resolved to truth values. Modal connectives are represented so that they
survive parsing and re-serialization, although they carry no modal
semantics.

Node Types:
    Atom: Resolved truth value leaf
    And, Or, IfThen, Iff: Binary connectives
    Not, Possibly, Necessarily: Unary connectives
    Parenthesised: Explicit grouping, kept for faithful re-serialization

All nodes support the visitor design pattern for traversal, and render back
to formula text with ``str()``.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Optional, Protocol, Tuple

from .exceptions import InvalidTruthTokenError


class TruthValue(Enum):
    """Truth value bound to an atom, keyed by its single-character token."""

    TRUE = "T"
    FALSE = "F"

    @classmethod
    def from_token(cls, token: str) -> TruthValue:
        """Resolve an assignment token ('T' or 'F') to a truth value.

        Raises:
            InvalidTruthTokenError: Token is not a known truth token
        """
        try:
            return cls(token)
        except ValueError:
            raise InvalidTruthTokenError(
                f"Invalid truth value '{token}' (expected 'T' or 'F')",
                fragment=token,
            ) from None

    def __bool__(self) -> bool:
        return self is TruthValue.TRUE


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement a visit method for each node type.
    """

    def visit_atom(self, n: Atom): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...

    def visit_if_then(self, n: IfThen): ...

    def visit_iff(self, n: Iff): ...

    def visit_not(self, n: Not): ...

    def visit_possibly(self, n: Possibly): ...

    def visit_necessarily(self, n: Necessarily): ...

    def visit_parenthesised(self, n: Parenthesised): ...


@dataclass(frozen=True, slots=True)
class Proposition:
    """Base class for all AST nodes of a propositional formula.

    Nodes own their children exclusively and are never mutated after
    construction, so a tree can be evaluated any number of times.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    @property
    def operands(self) -> Tuple[Proposition, ...]:
        """Direct children of this node, left to right."""
        return ()

    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Atom(Proposition):
    """Leaf holding the truth value an atom identifier resolved to.

    Attributes:
        value: Resolved truth value
        name: Atom identifier the value came from. Only used for rendering,
            it does not take part in equality or hashing.
    """

    value: TruthValue
    name: Optional[str] = field(default=None, compare=False)

    def accept(self, v: Visitor):
        return v.visit_atom(self)

    def __str__(self) -> str:
        if self.name is not None:
            return self.name
        return "⊤" if self.value is TruthValue.TRUE else "⊥"


@dataclass(frozen=True, slots=True)
class BinaryConnective(Proposition):
    """Connective combining a left and a right proposition.

    Attributes:
        left: Left operand
        right: Right operand
    """

    operator: ClassVar[str] = ""

    left: Proposition
    right: Proposition

    @property
    def operands(self) -> Tuple[Proposition, ...]:
        return (self.left, self.right)

    def __str__(self) -> str:
        return f"{self.left} {self.operator} {self.right}"


@dataclass(frozen=True, slots=True)
class UnaryConnective(Proposition):
    """Prefix connective applied to a single proposition.

    Attributes:
        operand: The proposition the connective applies to
    """

    operator: ClassVar[str] = ""

    operand: Proposition

    @property
    def operands(self) -> Tuple[Proposition, ...]:
        return (self.operand,)

    def __str__(self) -> str:
        return f"{self.operator}{self.operand}"


@dataclass(frozen=True, slots=True)
class And(BinaryConnective):
    """Logical conjunction, true when both operands are true."""

    operator: ClassVar[str] = "∧"

    def accept(self, v: Visitor):
        return v.visit_and(self)


@dataclass(frozen=True, slots=True)
class Or(BinaryConnective):
    """Logical disjunction, true when at least one operand is true."""

    operator: ClassVar[str] = "∨"

    def accept(self, v: Visitor):
        return v.visit_or(self)


@dataclass(frozen=True, slots=True)
class IfThen(BinaryConnective):
    """Material implication, false only when left is true and right is false."""

    operator: ClassVar[str] = "→"

    def accept(self, v: Visitor):
        return v.visit_if_then(self)


@dataclass(frozen=True, slots=True)
class Iff(BinaryConnective):
    """Biconditional, true when both operands have the same truth value."""

    operator: ClassVar[str] = "↔"

    def accept(self, v: Visitor):
        return v.visit_iff(self)


@dataclass(frozen=True, slots=True)
class Not(UnaryConnective):
    """Logical negation."""

    operator: ClassVar[str] = "¬"

    def accept(self, v: Visitor):
        return v.visit_not(self)


@dataclass(frozen=True, slots=True)
class Possibly(UnaryConnective):
    """Modal possibility.

    True modal semantics quantify over the worlds accessible from the
    current one. No frame is modelled here, so visitors treat the operand
    as the actual world only.
    """

    operator: ClassVar[str] = "◇"

    def accept(self, v: Visitor):
        return v.visit_possibly(self)


@dataclass(frozen=True, slots=True)
class Necessarily(UnaryConnective):
    """Modal necessity. See Possibly for the missing frame semantics."""

    operator: ClassVar[str] = "□"

    def accept(self, v: Visitor):
        return v.visit_necessarily(self)


@dataclass(frozen=True, slots=True)
class Parenthesised(Proposition):
    """Explicitly grouped sub-formula.

    Semantically transparent. Kept as its own node so that rendering
    reproduces the grouping of the source text.

    Attributes:
        inner: The grouped proposition
    """

    inner: Proposition

    def accept(self, v: Visitor):
        return v.visit_parenthesised(self)

    @property
    def operands(self) -> Tuple[Proposition, ...]:
        return (self.inner,)

    def __str__(self) -> str:
        return f"({self.inner})"


def depth(root: Proposition) -> int:
    """Return the number of nodes on the longest root-to-leaf path.

    Walks the tree with an explicit stack so arbitrarily deep trees can be
    measured without recursion.
    """
    deepest = 0
    stack = [(root, 1)]
    while stack:
        node, level = stack.pop()
        deepest = max(deepest, level)
        stack.extend((child, level + 1) for child in node.operands)
    return deepest
