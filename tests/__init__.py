"""
Test suite for decimal naturals

Contains:
- tests/unit/          : Unit tests for individual modules
"""
