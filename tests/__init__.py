"""
Test suite for safe-uint-math

Contains:
- tests/unit/          : Unit tests for individual modules
"""
