# tests/formula_tests/test_lexer_tokens.py
# This file is part of propcalc - A propositional formula evaluator
#
# Test suite for formula lexer tokenization and error handling

"""Test suite for the formula lexer.

Verifies tokenization of the formula alphabet and rejection of characters
outside it.
"""

import pytest
from formula.lexer import PropositionLexer
from formula.exceptions import ErrorKind, InvalidCharacterError
from utils.logger import get_logger


class TestPropositionLexer:
    """Test cases for lexer tokenization and error handling."""

    def setup_method(self):
        self.lexer = PropositionLexer()
        self.logger = get_logger()

    def _tokenize_to_types(self, text: str) -> list[str]:
        self.logger.debug(f"Tokenizing: '{text}'")
        return [token.type for token in self.lexer.tokenize(text)]

    VALID_TOKENIZATION_CASES = [
        ("P", ["ATOM"]),
        ("PQRST", ["ATOM"] * 5),
        ("P∧Q", ["ATOM", "AND", "ATOM"]),
        ("P∨Q", ["ATOM", "OR", "ATOM"]),
        ("P→Q", ["ATOM", "IMPLIES", "ATOM"]),
        ("P↔Q", ["ATOM", "IFF", "ATOM"]),
        ("¬P", ["NOT", "ATOM"]),
        ("◇P", ["POSSIBLY", "ATOM"]),
        ("◊P", ["POSSIBLY", "ATOM"]),
        ("□P", ["NECESSARILY", "ATOM"]),
        ("()", ["LPAREN", "RPAREN"]),
        # Whitespace handling
        (" \t P \n ∧ Q ", ["ATOM", "AND", "ATOM"]),
        (
            "¬(P ∨ Q) → □R",
            ["NOT", "LPAREN", "ATOM", "OR", "ATOM", "RPAREN", "IMPLIES", "NECESSARILY", "ATOM"],
        ),
        # Syntax is not the lexer's concern
        ("∧∧)(", ["AND", "AND", "RPAREN", "LPAREN"]),
    ]

    @pytest.mark.parametrize("input_text, expected_types", VALID_TOKENIZATION_CASES)
    def test_valid_tokenization(self, input_text, expected_types):
        assert self._tokenize_to_types(input_text) == expected_types

    def test_token_values_and_positions(self):
        tokens = list(self.lexer.tokenize("P∧(Q)"))

        assert [t.value for t in tokens] == ["P", "∧", "(", "Q", ")"]
        assert [t.index for t in tokens] == [0, 1, 2, 3, 4]

    INVALID_CHARACTER_CASES = [
        ("p", "p", 0),
        ("P & Q", "&", 2),
        ("P∧F", "F", 2),
        ("P∧U", "U", 2),
        ("P;Q", ";", 1),
        ("!P", "!", 0),
        ("P∧1", "1", 2),
    ]

    @pytest.mark.parametrize("text, char, position", INVALID_CHARACTER_CASES)
    def test_invalid_character_raises_error(self, text, char, position):
        with pytest.raises(InvalidCharacterError) as exc_info:
            list(self.lexer.tokenize(text))

        error = exc_info.value
        assert error.kind is ErrorKind.INVALID_CHARACTER
        assert error.fragment == char
        assert error.position == position
        assert char in str(error)
