"""
Determinism-friendly simulation primitives.

This package intentionally contains *small* pieces (the xorshift generator, seed
helpers, draw contracts, counters) that the rest of the core builds on.
"""
