"""
Test suite for the core language-extension utilities

Contains:
- tests/unit/          : Unit tests for individual modules
"""
