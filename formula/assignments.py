# formula/assignments.py
# This file is part of propcalc - A propositional formula evaluator
#
# Input splitting and atom assignment resolution

"""Split raw input into formula and assignments, and build the atom map.

Input has the form ``"<formula>;<atom>=<value>,<atom>=<value>,..."``.
Whitespace is never significant and is removed before anything else.
Atom identifiers and truth tokens are single characters: only the first
character of each side of an assignment is read.

The atom map keeps the raw truth token of every atom. Tokens are checked
by the parser when an atom is referenced, so an invalid token assigned to
an unused atom is harmless.
"""

from __future__ import annotations
from typing import Dict, Iterator, Mapping, Tuple, Union

from .ast_nodes import TruthValue
from .exceptions import MalformedAssignmentError, MissingSeparatorError
from utils.logger import get_logger

ATOM_SYMBOLS = frozenset("PQRST")

SEPARATOR = ";"
PAIR_SEPARATOR = ","
BINDING = "="


class AtomMap(Mapping[str, str]):
    """Immutable mapping from atom identifier to its assigned truth token.

    Values may be given as TruthValue members or as raw tokens; members
    are stored as their token.
    """

    __slots__ = ("_tokens",)

    def __init__(self, values: Mapping[str, Union[TruthValue, str]] = None):
        tokens: Dict[str, str] = {}
        for atom, value in (values or {}).items():
            _check_atom_symbol(atom)
            tokens[atom] = value.value if isinstance(value, TruthValue) else value
        self._tokens = tokens

    def __getitem__(self, atom: str) -> str:
        return self._tokens[atom]

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        pairs = ",".join(f"{atom}={token}" for atom, token in self._tokens.items())
        return f"AtomMap({pairs})"


def strip_whitespace(text: str) -> str:
    return "".join(text.split())


def split_input(text: str) -> Tuple[str, str]:
    """Split raw input into formula text and assignment text.

    Whitespace is removed first. Exactly one separator is allowed.

    Args:
        text: Raw input string

    Returns:
        Tuple of (formula, assignments), both free of whitespace

    Raises:
        MissingSeparatorError: Input has no ';'
        MalformedAssignmentError: Input has more than one ';'
    """
    compact = strip_whitespace(text)
    formula, separator, assignments = compact.partition(SEPARATOR)
    if not separator:
        raise MissingSeparatorError(
            f"Missing '{SEPARATOR}' between formula and assignments in '{compact}'",
            fragment=compact,
        )
    if SEPARATOR in assignments:
        raise MalformedAssignmentError(
            f"Unexpected second '{SEPARATOR}' in assignments '{assignments}'",
            fragment=SEPARATOR,
        )
    return formula, assignments


def build_atom_map(assignments: str) -> AtomMap:
    """Build the atom map from a comma-separated assignment list.

    Later assignments to the same atom overwrite earlier ones.

    Args:
        assignments: Text such as "P=T,Q=F"

    Returns:
        Immutable AtomMap

    Raises:
        MalformedAssignmentError: A pair lacks '=', has an empty side, or
            names an unknown atom symbol
    """
    logger = get_logger()
    tokens: Dict[str, str] = {}

    for pair in strip_whitespace(assignments).split(PAIR_SEPARATOR):
        atom, token = _split_pair(pair)
        if atom in tokens and tokens[atom] != token:
            logger.assignment_overridden(atom, tokens[atom], token)
        tokens[atom] = token

    atom_map = AtomMap(tokens)
    logger.debug(f"Built atom map: {atom_map!r}")
    return atom_map


def _split_pair(pair: str) -> Tuple[str, str]:
    """Return the (atom, token) characters of a single '<atom>=<value>' pair.

    Anything after a second '=' is ignored.
    """
    parts = pair.split(BINDING)
    if len(parts) < 2:
        raise MalformedAssignmentError(
            f"Assignment '{pair}' must have the form <atom>{BINDING}<value>",
            fragment=pair,
        )

    name, value = parts[0], parts[1]
    if not name or not value:
        raise MalformedAssignmentError(
            f"Assignment '{pair}' has an empty atom or value", fragment=pair
        )

    atom = name[0]
    _check_atom_symbol(atom, pair)
    return atom, value[0]


def _check_atom_symbol(atom: str, context: str = None) -> None:
    if atom not in ATOM_SYMBOLS:
        raise MalformedAssignmentError(
            f"Unknown atom symbol '{atom}' in assignment '{context or atom}' "
            f"(expected one of {', '.join(sorted(ATOM_SYMBOLS))})",
            fragment=context or atom,
        )
