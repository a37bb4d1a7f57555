"""
Test suite for radix converter

Contains:
- tests/unit/          : Unit tests for individual modules
"""
