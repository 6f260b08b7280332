"""Performance benchmarks for barrierlp.

This package contains microbenchmarks for the solver hot path, comparing the
sequential and thread-pool gradient accumulation.
"""
