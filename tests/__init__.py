"""
Test suite for beautiful-thirteen

Contains:
- tests/unit/          : Unit tests for individual modules
"""
