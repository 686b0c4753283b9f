"""
Test suite for humanesort

Contains:
- tests/unit/          : Unit tests for individual modules
"""
