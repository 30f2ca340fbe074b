"""
Test suite for tabfunc

Contains:
- tests/unit/          : Unit tests for individual modules
- tests/property/      : Hypothesis property tests for function invariants
"""
