"""
Test suite for bigfloat

Contains:
- tests/unit/          : Unit tests for individual modules
"""
