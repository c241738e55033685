"""
Test suite for baco

Contains:
- tests/unit/          : Unit tests for codecs, registry, validator and engine
"""
