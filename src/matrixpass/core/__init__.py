"""
Core domain models, integer arithmetic and fingerprinting primitives.

This module contains the building blocks that are independent of the
numbers API transport.
"""
