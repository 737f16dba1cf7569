# formula/__init__.py
# This file is part of propcalc - A propositional formula evaluator
#
# Formula splitting, atom resolution and parsing components

"""Propositional formula parsing with inline atom assignments.

Input strings combine a formula and the truth values of its atoms:

    "P ∧ (Q → ¬R);P=T,Q=F,R=T"

Parsing happens in two steps. The assignment list is turned into an
immutable AtomMap, then the formula is parsed into an AST whose atom leaves
already carry their truth values.

Core Functions:
    parse: Parses formula text against an atom map
    parse_proposition_string: Complete split, map and parse pipeline

Grammar Features:
    - Connectives ∧, ∨, →, ↔ and prefix ¬, ◇, □
    - No precedence: binary connectives take the rest of the formula as
      their right operand, so chains are right-associative
    - Parenthetical grouping, preserved in the tree

Example:
    >>> from formula import parse_proposition_string
    >>> ast = parse_proposition_string("P ∧ Q;P=T,Q=F")
    >>> str(ast)
    'P ∧ Q'
"""

from typing import Mapping, Union

from .assignments import AtomMap, build_atom_map, split_input
from .ast_nodes import Proposition, TruthValue
from .exceptions import (
    EmptyExpressionError,
    ErrorKind,
    InvalidCharacterError,
    InvalidTruthTokenError,
    MalformedAssignmentError,
    MissingSeparatorError,
    NestingTooDeepError,
    ParseError,
    UnexpectedOperatorError,
    UnknownAtomError,
    UnmatchedParenthesisError,
)
from .grammar import DEFAULT_MAX_DEPTH, _PropositionParser
from utils.logger import get_logger


def parse(
    source: str,
    atoms: Mapping[str, Union[TruthValue, str]],
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Proposition:
    """Parse formula text into an AST, resolving atoms against an atom map.

    Uses a fresh parser instance for each invocation, so concurrent callers
    never share parser state.

    Args:
        source: Formula text, e.g. "P ∧ Q"; whitespace is ignored
        atoms: AtomMap, or any mapping from atom identifier to TruthValue
            or 'T'/'F' token
        max_depth: Deepest tree accepted

    Returns:
        Root AST node of the parsed formula

    Raises:
        ParseError: Formula is malformed or references an unassigned atom

    Example:
        >>> str(parse("P∧(Q∨R)", {"P": "T", "Q": "F", "R": "T"}))
        'P ∧ (Q ∨ R)'
    """
    if not isinstance(atoms, AtomMap):
        atoms = AtomMap(atoms)

    parser = _PropositionParser(atoms, max_depth=max_depth)
    return parser.parse(source)


def parse_proposition_string(text: str, max_depth: int = DEFAULT_MAX_DEPTH) -> Proposition:
    """Split "<formula>;<assignments>" input, build the atom map and parse.

    Args:
        text: Combined input, e.g. "¬(P ∨ Q);P=F,Q=F"
        max_depth: Deepest tree accepted

    Returns:
        Root AST node of the parsed formula

    Raises:
        ParseError: Input, assignments or formula are malformed
    """
    logger = get_logger()
    logger.debug(f"Parsing proposition string: {text}")

    formula, assignments = split_input(text)
    atoms = build_atom_map(assignments)
    result = parse(formula, atoms, max_depth=max_depth)

    logger.formula_parsed(formula, str(result))
    return result


__all__ = [
    "parse",
    "parse_proposition_string",
    "split_input",
    "build_atom_map",
    "AtomMap",
    "TruthValue",
    "Proposition",
    "ErrorKind",
    "ParseError",
    "MissingSeparatorError",
    "MalformedAssignmentError",
    "UnknownAtomError",
    "InvalidTruthTokenError",
    "UnexpectedOperatorError",
    "UnmatchedParenthesisError",
    "InvalidCharacterError",
    "EmptyExpressionError",
    "NestingTooDeepError",
]

__version__ = "1.0.0"
__description__ = "Propositional formula parsing with inline atom assignments"
