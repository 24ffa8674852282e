"""
Test suite for the MathUtils fixture library

Contains:
- tests/unit/          : Unit tests for individual modules
"""
