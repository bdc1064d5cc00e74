"""
Core math engine, domain models and request contracts.

This package is pure computation: no I/O, no UI state, no shared mutable
state between calls.
"""
