"""
Test suite for bigcalc

Contains:
- tests/unit/          : Unit tests for individual modules
"""
