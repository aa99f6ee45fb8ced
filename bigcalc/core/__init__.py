"""
Core domain models, mathematical primitives, and contracts.

This module contains the building blocks that are independent of the
calculator front-end: digit-sequence arithmetic, the native float path,
operand value types and JSON contracts.
"""
