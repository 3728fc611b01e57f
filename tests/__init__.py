"""
Test suite for safeint

Contains:
- tests/unit/          : Unit tests for individual modules
- tests/property/      : Property-based tests (hypothesis)
"""
