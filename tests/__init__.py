"""
linsgd Test Suite
=================

Test Categories:
- Unit Tests: linear algebra, objective, sampler, optimizer, validation tools
- Integration Tests: end-to-end fitting, learning curves and CLI runs
- Property Tests: gradient and cost identities (hypothesis)

Requirements:
- pytest >= 7.4.0
- hypothesis >= 6.82.0
- NumPy >= 1.21.0
"""
