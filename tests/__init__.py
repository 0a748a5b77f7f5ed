"""
Test suite for ecom-utils

Contains:
- tests/unit/          : Unit tests for individual modules
"""
