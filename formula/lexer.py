# formula/lexer.py
# This file is part of propcalc - A propositional formula evaluator
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional formula strings.

Breaks formula text into single-character tokens for parser consumption.

Supported Tokens:
- Atoms: P, Q, R, S, T
- Binary connectives: ∧, ∨, →, ↔
- Prefix connectives: ¬, ◇ (also ◊), □
- Grouping: (, )
- Whitespace: ignored during tokenization
"""

from sly import Lexer

from .exceptions import InvalidCharacterError
from utils.logger import get_logger


class PropositionLexer(Lexer):
    """SLY-based lexer for propositional formula tokenization.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "ATOM",
        "AND",
        "OR",
        "IMPLIES",
        "IFF",
        "NOT",
        "POSSIBLY",
        "NECESSARILY",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    ATOM = r"[PQRST]"

    AND = r"∧"
    OR = r"∨"
    IMPLIES = r"→"
    IFF = r"↔"

    NOT = r"¬"
    POSSIBLY = r"[◇◊]"
    NECESSARILY = r"□"

    LPAREN = r"\("
    RPAREN = r"\)"

    def error(self, t):
        """Reject characters outside the formula alphabet.

        Args:
            t: SLY token object whose value starts at the offending character

        Raises:
            InvalidCharacterError: Always raised with character and position
        """
        illegal_char = t.value[0]
        error_pos = self.index

        get_logger().debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise InvalidCharacterError(
            f"Invalid character '{illegal_char}' at position {error_pos}",
            fragment=illegal_char,
            position=error_pos,
        )
