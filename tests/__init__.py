"""
Test suite for biguint

Contains:
- tests/unit/          : Unit tests for individual modules
"""
