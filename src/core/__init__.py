"""
Core ordering library: comparison relations, their composition and the
primitive total-order semantics they build on.

This module contains no I/O and no external state; every relation is an
immutable value after construction.
"""
