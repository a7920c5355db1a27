"""
Core domain models, mathematical primitives, and contracts.

Everything here is synchronous, stateless between calls, and independent
of I/O.
"""
