"""
Test suite for roman-numerals

Contains:
- tests/unit/          : Unit tests for individual modules
"""
