"""
Test suite for the OOH billing engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""
