"""
Test suite for numeris

Contains:
- tests/unit/          : Unit tests for individual modules
"""
