"""
Test suite for the Bigint library

Contains:
- tests/unit/          : Unit tests for individual modules
"""
