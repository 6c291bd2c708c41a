__doc__ = """Utilities for testing that __eq__ and __hash__ implementations form a lawful equivalence relation."""

from .testing import EqualsTester, EquivalenceError, TestCaseAsserter

__all__ = ['EqualsTester', 'EquivalenceError', 'TestCaseAsserter']
