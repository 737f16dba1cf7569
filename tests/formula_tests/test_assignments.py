# tests/formula_tests/test_assignments.py
# This file is part of propcalc - A propositional formula evaluator
#
# Test suite for input splitting and atom map construction

"""Test suite for splitting input and building atom maps."""

import pytest
from formula import AtomMap, TruthValue, build_atom_map, split_input
from formula.exceptions import (
    ErrorKind,
    InvalidTruthTokenError,
    MalformedAssignmentError,
    MissingSeparatorError,
)


class TestSplitInput:
    """Test cases for separating the formula from its assignments."""

    SPLIT_CASES = [
        ("P ∧ Q;P=T,Q=F", ("P∧Q", "P=T,Q=F")),
        ("P ∧ Q ; P = T , Q = F", ("P∧Q", "P=T,Q=F")),
        ("\tP\n;\nP=T ", ("P", "P=T")),
        (";P=T", ("", "P=T")),
    ]

    @pytest.mark.parametrize("text, expected", SPLIT_CASES)
    def test_split(self, text, expected):
        assert split_input(text) == expected

    @pytest.mark.parametrize("text", ["P∧Q", "P ∧ Q P=T", ""])
    def test_missing_separator(self, text):
        with pytest.raises(MissingSeparatorError) as exc_info:
            split_input(text)

        assert exc_info.value.kind is ErrorKind.MISSING_SEPARATOR

    @pytest.mark.parametrize("text", ["P;P=T;Q", "P;P=T;Q=F", "P ; P=T ; "])
    def test_second_separator_is_malformed(self, text):
        with pytest.raises(MalformedAssignmentError) as exc_info:
            split_input(text)

        assert exc_info.value.kind is ErrorKind.MALFORMED_ASSIGNMENT
        assert exc_info.value.fragment == ";"


class TestBuildAtomMap:
    """Test cases for turning assignment lists into atom maps."""

    def test_keeps_truth_tokens(self):
        atoms = build_atom_map("P=T,Q=F")

        assert dict(atoms) == {"P": "T", "Q": "F"}
        assert len(atoms) == 2
        assert "R" not in atoms

    def test_whitespace_is_ignored(self):
        assert build_atom_map(" P = T ,\tQ=F ") == build_atom_map("P=T,Q=F")

    def test_only_first_character_of_each_side_is_read(self):
        atoms = build_atom_map("Pxyz=True,Q=False")

        assert atoms["P"] == "T"
        assert atoms["Q"] == "F"

    def test_last_assignment_wins(self):
        atoms = build_atom_map("P=T,Q=T,P=F")

        assert atoms["P"] == "F"
        assert list(atoms) == ["P", "Q"]

    def test_text_after_second_binding_is_ignored(self):
        assert dict(build_atom_map("P=T=F")) == {"P": "T"}
        assert dict(build_atom_map("P=F=T,Q=T==")) == {"P": "F", "Q": "T"}

    MALFORMED_CASES = [
        "",
        "P",
        "P=T,",
        "PT,Q=F",
        "=T",
        "P=",
        "P==T",
        "X=T",
        "p=T",
    ]

    @pytest.mark.parametrize("assignments", MALFORMED_CASES)
    def test_malformed_assignment(self, assignments):
        with pytest.raises(MalformedAssignmentError) as exc_info:
            build_atom_map(assignments)

        assert exc_info.value.kind is ErrorKind.MALFORMED_ASSIGNMENT
        assert str(exc_info.value)

    @pytest.mark.parametrize("assignments, token", [("P=X", "X"), ("P=T,Q=t", "t"), ("Q=1", "1")])
    def test_invalid_truth_token_is_kept_unchecked(self, assignments, token):
        atoms = build_atom_map(assignments)

        assert token in atoms.values()


class TestAtomMap:
    """Test cases for the immutable atom map."""

    def test_accepts_tokens_and_truth_values(self):
        atoms = AtomMap({"P": "T", "Q": TruthValue.FALSE})

        assert atoms["P"] == "T"
        assert atoms["Q"] == "F"

    def test_is_immutable(self):
        atoms = AtomMap({"P": "T"})

        with pytest.raises(TypeError):
            atoms["P"] = "F"

    def test_copies_its_source(self):
        source = {"P": "T"}
        atoms = AtomMap(source)
        source["P"] = "F"

        assert atoms["P"] == "T"

    def test_rejects_unknown_symbols(self):
        with pytest.raises(MalformedAssignmentError):
            AtomMap({"Z": "T"})

    def test_repr_lists_assignments(self):
        assert repr(AtomMap({"P": "T", "Q": "F"})) == "AtomMap(P=T,Q=F)"


class TestTruthValue:
    @pytest.mark.parametrize("token, expected", [("T", True), ("F", False)])
    def test_from_token(self, token, expected):
        assert bool(TruthValue.from_token(token)) is expected

    @pytest.mark.parametrize("token", ["X", "t", "1"])
    def test_from_invalid_token(self, token):
        with pytest.raises(InvalidTruthTokenError) as exc_info:
            TruthValue.from_token(token)

        assert exc_info.value.kind is ErrorKind.INVALID_TRUTH_TOKEN
        assert exc_info.value.fragment == token
