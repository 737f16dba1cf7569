# formula/grammar.py
# This file is part of propcalc - A propositional formula evaluator
#
# LALR(1) grammar and parser for propositional formulas using SLY

"""Propositional formula grammar implemented with the SLY parser generator.

The grammar has no operator precedence. A binary connective takes the
operand on its left and everything that follows it as its right operand,
and a prefix connective applies to everything that follows it:

    expr    : chain
            | (NOT | POSSIBLY | NECESSARILY) expr
    chain   : operand
            | operand chain
            | operand (AND | OR | IMPLIES | IFF) expr
    operand : ATOM
            | LPAREN expr RPAREN

Chains therefore associate to the right ("P ∧ Q ∨ R" is "P ∧ (Q ∨ R)"
and "¬P ∧ Q" is "¬(P ∧ Q)"), and parentheses are the only way to group
mixed connectives differently. A parenthesised group is an operand, so it
may be followed by a binary connective at the same level. An operand
directly followed by another operand is replaced by it ("P Q" is "Q"),
but a prefix connective may not follow an operand.

Atoms are resolved against the atom map while the tree is built. A truth
token is only checked once its atom is referenced, so the resulting tree
never contains unresolved identifiers or invalid values.
"""

from typing import List, Optional

from sly import Parser

from .assignments import AtomMap
from .ast_nodes import (
    And,
    Atom,
    Iff,
    IfThen,
    Necessarily,
    Not,
    Or,
    Parenthesised,
    Possibly,
    Proposition,
    TruthValue,
    depth,
)
from .exceptions import (
    EmptyExpressionError,
    InvalidTruthTokenError,
    NestingTooDeepError,
    ParseError,
    UnexpectedOperatorError,
    UnknownAtomError,
    UnmatchedParenthesisError,
)
from .lexer import PropositionLexer
from utils.logger import get_logger

DEFAULT_MAX_DEPTH = 200

BINARY_TOKENS = frozenset({"AND", "OR", "IMPLIES", "IFF"})
PREFIX_TOKENS = frozenset({"NOT", "POSSIBLY", "NECESSARILY"})
CONNECTIVE_TOKENS = BINARY_TOKENS | PREFIX_TOKENS
OPERAND_END_TOKENS = frozenset({"ATOM", "RPAREN"})


class _PropositionParser(Parser):
    """SLY-based LALR(1) parser for propositional formulas.

    A fresh instance is used for every formula; it holds the atom map and
    token list of the parse in progress.

    Attributes:
        tokens: Token types from PropositionLexer
        max_depth: Deepest tree accepted before NestingTooDeepError
    """

    tokens = PropositionLexer.tokens

    def __init__(self, atoms: AtomMap, max_depth: int = DEFAULT_MAX_DEPTH):
        self.atoms = atoms
        self.max_depth = max_depth
        self._tokens: List = []

    @_("expr")
    def start(self, p) -> Proposition:
        return p.expr

    @_("chain")
    def expr(self, p) -> Proposition:
        return p.chain

    @_("NOT expr")
    def expr(self, p) -> Proposition:
        """Negation of the rest of the formula."""
        return Not(p.expr)

    @_("POSSIBLY expr")
    def expr(self, p) -> Proposition:
        return Possibly(p.expr)

    @_("NECESSARILY expr")
    def expr(self, p) -> Proposition:
        return Necessarily(p.expr)

    @_("operand")
    def chain(self, p) -> Proposition:
        return p.operand

    @_("operand chain")
    def chain(self, p) -> Proposition:
        """An operand directly followed by another replaces it."""
        return p.chain

    @_("operand AND expr")
    def chain(self, p) -> Proposition:
        """Conjunction, right operand is the rest of the formula."""
        return And(p.operand, p.expr)

    @_("operand OR expr")
    def chain(self, p) -> Proposition:
        return Or(p.operand, p.expr)

    @_("operand IMPLIES expr")
    def chain(self, p) -> Proposition:
        return IfThen(p.operand, p.expr)

    @_("operand IFF expr")
    def chain(self, p) -> Proposition:
        return Iff(p.operand, p.expr)

    @_("ATOM")
    def operand(self, p) -> Atom:
        """Atom identifier, resolved to its assigned truth value."""
        symbol = p.ATOM
        position = getattr(p, "index", None)
        try:
            token = self.atoms[symbol]
        except KeyError:
            raise UnknownAtomError(
                f"Atom '{symbol}' at position {position} has no assigned value",
                fragment=symbol,
                position=position,
            ) from None

        try:
            value = TruthValue.from_token(token)
        except InvalidTruthTokenError:
            raise InvalidTruthTokenError(
                f"Atom '{symbol}' at position {position} is assigned '{token}' "
                f"(expected 'T' or 'F')",
                fragment=token,
                position=position,
            ) from None
        return Atom(value, symbol)

    @_("LPAREN expr RPAREN")
    def operand(self, p) -> Parenthesised:
        return Parenthesised(p.expr)

    def parse(self, text: str) -> Proposition:
        """Parse formula text into an AST.

        Args:
            text: Formula string; whitespace is ignored

        Returns:
            Root node of the parsed formula

        Raises:
            ParseError: Any subclass describing why the formula is malformed
        """
        logger = get_logger()
        logger.debug(f"Parsing formula: {text}")

        try:
            self._tokens = list(PropositionLexer().tokenize(text))

            if not self._tokens:
                raise EmptyExpressionError("Input formula is empty.", fragment=text)

            _check_parentheses(self._tokens)

            result = super().parse(iter(self._tokens))
            if result is None:
                raise ParseError("Failed to parse formula (syntax error).")

            tree_depth = depth(result)
            if tree_depth > self.max_depth:
                raise NestingTooDeepError(
                    f"Formula nests {tree_depth} levels deep "
                    f"(maximum is {self.max_depth})",
                    fragment=text,
                )

            logger.debug(
                f"Successfully parsed formula into {type(result).__name__}"
            )
            return result

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

    def error(self, token):
        """Classify a syntax error and raise the matching ParseError.

        Called by SLY with the token that no grammar rule accepts, or None
        at end of input. Parentheses are already known to be balanced.

        Raises:
            ParseError: Always raised
        """
        if token is None:
            last = self._tokens[-1]
            if last.type in CONNECTIVE_TOKENS:
                raise _missing_operand_after(last)
            raise ParseError("Syntax error: Unexpected end of formula")

        previous = self._previous(token)
        previous_type = previous.type if previous is not None else None

        if token.type == "RPAREN":
            if previous_type == "LPAREN":
                raise EmptyExpressionError(
                    f"Empty parenthesised group at position {previous.index}",
                    fragment="()",
                    position=previous.index,
                )
            if previous_type in CONNECTIVE_TOKENS:
                raise _missing_operand_after(previous)

        elif token.type in BINARY_TOKENS:
            if previous_type not in OPERAND_END_TOKENS:
                raise UnexpectedOperatorError(
                    f"Connective '{token.value}' at position {token.index} "
                    f"has no left operand",
                    fragment=token.value,
                    position=token.index,
                )

        elif token.type in PREFIX_TOKENS:
            if previous_type in OPERAND_END_TOKENS:
                raise UnexpectedOperatorError(
                    f"Prefix connective '{token.value}' at position {token.index} "
                    f"cannot follow an operand",
                    fragment=token.value,
                    position=token.index,
                )

        raise ParseError(
            f"Syntax error near '{token.value}' "
            f"(type: {token.type}) at position {token.index}",
            fragment=token.value,
            position=token.index,
        )

    def _previous(self, token):
        for i, candidate in enumerate(self._tokens):
            if candidate is token:
                return self._tokens[i - 1] if i else None
        return None


def _missing_operand_after(token) -> UnexpectedOperatorError:
    return UnexpectedOperatorError(
        f"Connective '{token.value}' at position {token.index} has no operand after it",
        fragment=token.value,
        position=token.index,
    )


def _check_parentheses(tokens) -> None:
    """Raise UnmatchedParenthesisError unless every '(' has a matching ')'."""
    open_positions: List[int] = []
    for token in tokens:
        if token.type == "LPAREN":
            open_positions.append(token.index)
        elif token.type == "RPAREN":
            if not open_positions:
                raise UnmatchedParenthesisError(
                    f"Unmatched ')' at position {token.index}",
                    fragment=")",
                    position=token.index,
                )
            open_positions.pop()

    if open_positions:
        position: Optional[int] = open_positions[-1]
        raise UnmatchedParenthesisError(
            f"Unclosed '(' at position {position}",
            fragment="(",
            position=position,
        )
