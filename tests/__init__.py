"""
Test suite for mathcore

Contains:
- tests/unit/          : Unit tests for individual modules and services
"""
