# tests/conftest.py
# This file is part of propcalc - A propositional formula evaluator
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for propcalc tests.

Ensures the project packages are importable from a source checkout and
provides common atoms, maps and formulas.
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Skip the session if the project packages cannot be imported."""
    try:
        import formula
        import logic
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def true_atom():
    from formula.ast_nodes import Atom, TruthValue

    return Atom(TruthValue.TRUE)


@pytest.fixture
def false_atom():
    from formula.ast_nodes import Atom, TruthValue

    return Atom(TruthValue.FALSE)


@pytest.fixture
def sample_atoms():
    """Atom map with every atom symbol assigned.

    Returns:
        AtomMap: P=T, Q=F, R=T, S=F, T=T
    """
    from formula import AtomMap

    return AtomMap({"P": "T", "Q": "F", "R": "T", "S": "F", "T": "T"})


@pytest.fixture
def distributive_formula():
    """Distribution of ∨ over ∧ without outer grouping around either side."""
    return "P ∨ (Q ∧ R) ↔ (P ∨ Q) ∧ (P ∨ R)"
