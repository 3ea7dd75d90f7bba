"""
Integration Tests for linsgd
============================

End-to-end tests of configuration loading, fitting, learning curves and the
command-line interface.
"""
