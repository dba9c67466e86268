"""
Test suite for the share dividend calculator

Contains:
- tests/unit/          : Unit tests for individual modules
"""
