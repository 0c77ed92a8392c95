"""
Core domain models, exact-arithmetic primitives, and invariants.

This module contains the foundational building blocks that are independent
of I/O (files, command line, output formatting).
"""
