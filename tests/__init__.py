"""
Test suite for ordering-core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
