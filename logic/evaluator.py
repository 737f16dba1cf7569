# logic/evaluator.py
# This file is part of propcalc - A propositional formula evaluator
#
# Visitor-based truth evaluation of parsed propositions

"""Two-valued evaluation of proposition trees.

Evaluation is a pure structural fold over the tree: it never mutates a node,
so the same tree may be evaluated any number of times, from any number of
threads. Both operands of a binary connective are always evaluated.

Modal connectives have no frame of possible worlds to quantify over. Both
evaluate their operand in the actual world only, which makes them
transparent.
"""

from __future__ import annotations

from formula import ast_nodes as ast
from utils.logger import get_logger


class Evaluator(ast.Visitor):
    """Computes the truth value of a proposition tree."""

    def evaluate(self, root: ast.Proposition) -> bool:
        """Evaluate a fully built tree.

        Args:
            root: Root node of a parsed or hand-built proposition

        Returns:
            Truth value of the whole proposition
        """
        result = root.accept(self)
        get_logger().evaluation_result(str(root), result)
        return result

    def _visit(self, node: ast.Proposition) -> bool:
        return node.accept(self)

    def visit_atom(self, n: ast.Atom) -> bool:
        return bool(n.value)

    def visit_and(self, n: ast.And) -> bool:
        left = self._visit(n.left)
        right = self._visit(n.right)
        return left and right

    def visit_or(self, n: ast.Or) -> bool:
        left = self._visit(n.left)
        right = self._visit(n.right)
        return left or right

    def visit_if_then(self, n: ast.IfThen) -> bool:
        """Material implication: ¬left ∨ right."""
        left = self._visit(n.left)
        right = self._visit(n.right)
        return not left or right

    def visit_iff(self, n: ast.Iff) -> bool:
        return self._visit(n.left) == self._visit(n.right)

    def visit_not(self, n: ast.Not) -> bool:
        return not self._visit(n.operand)

    def visit_possibly(self, n: ast.Possibly) -> bool:
        # Only the actual world exists, so "some accessible world" is this one.
        get_logger().modal_placeholder(n.operator)
        return self._visit(n.operand)

    def visit_necessarily(self, n: ast.Necessarily) -> bool:
        get_logger().modal_placeholder(n.operator)
        return self._visit(n.operand)

    def visit_parenthesised(self, n: ast.Parenthesised) -> bool:
        return self._visit(n.inner)


def evaluate(root: ast.Proposition) -> bool:
    """Evaluate a proposition tree with a fresh Evaluator."""
    return Evaluator().evaluate(root)
