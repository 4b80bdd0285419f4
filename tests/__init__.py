"""
Test suite for matrixpass

Contains:
- tests/unit/          : Unit tests for individual modules and the pipeline
"""
