"""
Core domain models, arithmetic primitives, and contracts.

This package contains the whole arithmetic/storage engine; display and
the command line are thin consumers of it.
"""
