# formula/exceptions.py
# This file is part of propcalc - A propositional formula evaluator
#
# Typed exceptions for formula splitting, parsing and atom resolution

"""Domain-specific exceptions for propositional formula processing.

Every failure in the pipeline is an input-validation failure. Each one is
raised at the point where the malformed input is detected and carries the
kind of failure, the offending fragment and, where meaningful, its
position in the formula text, so callers can branch on the
cause and report a precise diagnostic.
"""

from enum import Enum, auto
from typing import Optional


class ErrorKind(Enum):
    """Distinct causes of a failed parse."""

    MISSING_SEPARATOR = auto()
    MALFORMED_ASSIGNMENT = auto()
    UNKNOWN_ATOM = auto()
    INVALID_TRUTH_TOKEN = auto()
    UNEXPECTED_OPERATOR = auto()
    UNMATCHED_PARENTHESIS = auto()
    INVALID_CHARACTER = auto()
    EMPTY_EXPRESSION = auto()
    NESTING_TOO_DEEP = auto()


class ParseError(RuntimeError):
    """Exception raised when an input string cannot be turned into a proposition.

    Base class for the whole taxonomy. Raised directly only for failures
    that escape the classification below.

    Attributes:
        kind: Failure kind, None for unclassified failures
        fragment: Offending character or substring
        position: Index into the formula text handed to the parser, if known
    """

    kind: Optional[ErrorKind] = None

    def __init__(
        self,
        message: str,
        fragment: Optional[str] = None,
        position: Optional[int] = None,
    ):
        super().__init__(message)
        self.fragment = fragment
        self.position = position


class MissingSeparatorError(ParseError):
    """No ';' separates the formula from its assignments."""

    kind = ErrorKind.MISSING_SEPARATOR


class MalformedAssignmentError(ParseError):
    """An assignment pair is not of the form <atom>=<value>."""

    kind = ErrorKind.MALFORMED_ASSIGNMENT


class UnknownAtomError(ParseError):
    """The formula references an atom with no assignment."""

    kind = ErrorKind.UNKNOWN_ATOM


class InvalidTruthTokenError(ParseError):
    """An assigned value is neither 'T' nor 'F'."""

    kind = ErrorKind.INVALID_TRUTH_TOKEN


class UnexpectedOperatorError(ParseError):
    """A connective is missing the operand it needs."""

    kind = ErrorKind.UNEXPECTED_OPERATOR


class UnmatchedParenthesisError(ParseError):
    """A parenthesis has no partner: an unclosed '(' or a stray ')'."""

    kind = ErrorKind.UNMATCHED_PARENTHESIS


class InvalidCharacterError(ParseError):
    """A character outside the formula alphabet."""

    kind = ErrorKind.INVALID_CHARACTER


class EmptyExpressionError(ParseError):
    """Nothing to parse: empty formula or empty parenthesised group."""

    kind = ErrorKind.EMPTY_EXPRESSION


class NestingTooDeepError(ParseError):
    """The parsed tree exceeds the configured maximum depth."""

    kind = ErrorKind.NESTING_TOO_DEEP
