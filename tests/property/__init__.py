"""
Property-Based Tests for linsgd
===============================

Hypothesis-based tests of mathematical invariants:
- Analytic gradient agrees with finite differences
- Cost is non-negative and vanishes at an exact fit
- Batch sampling always yields unique in-range indices
"""
