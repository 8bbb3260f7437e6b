"""
Test suite for pairwise-totals

Contains:
- tests/unit/          : Unit tests for individual modules
"""
