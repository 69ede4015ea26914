"""
Test suite for find_e

Contains:
- tests/unit/          : Unit tests for individual modules
"""
