"""
Test suite for angles

Contains:
- tests/unit/          : Unit tests for individual modules
"""
