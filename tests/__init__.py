"""
Test suite for reciprocal

Contains:
- tests/unit/          : Unit tests for individual modules
"""
