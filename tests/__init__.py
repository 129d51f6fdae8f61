"""
Test suite for even-squares

Contains:
- tests/unit/          : Unit tests for individual modules and the end-to-end run
"""
