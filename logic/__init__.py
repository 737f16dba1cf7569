# logic/__init__.py
# This file is part of propcalc - A propositional formula evaluator

"""Truth evaluation interface.

This package provides:
  • Evaluator: visitor computing the truth value of a proposition tree
  • evaluate: evaluate an already parsed tree
  • evaluate_propositional_string: split, parse and evaluate
    "<formula>;<assignments>" input in one call
"""

from formula import parse_proposition_string
from utils.logger import get_logger

from .evaluator import Evaluator, evaluate


def evaluate_propositional_string(text: str) -> bool:
    """Evaluate combined formula-and-assignments input to a truth value.

    The whole tree is built before evaluation starts, so malformed input
    never yields a partial result.

    Args:
        text: Input such as "P ∨ (Q ∧ R);P=F,Q=F,R=T"

    Returns:
        Truth value of the formula under the given assignments

    Raises:
        ParseError: Input is malformed; the subclass names the cause
    """
    get_logger().debug(f"Evaluating proposition string: {text}")
    return evaluate(parse_proposition_string(text))


__all__ = [
    "Evaluator",
    "evaluate",
    "evaluate_propositional_string",
]
