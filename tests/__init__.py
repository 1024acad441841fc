"""
Test suite for strictbuiltins

Contains:
- tests/unit/          : Unit tests for individual modules and the public API
"""
