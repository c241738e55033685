"""
Core domain models, codecs, and contracts.

This module contains the foundational building blocks of the converter:
encoding metadata, the canonical decimal value, per-encoding codecs and
literal validation. Nothing here keeps state between calls.
"""
