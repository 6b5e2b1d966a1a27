"""Validation test suite for serialized model XML.

This package contains tests to ensure generated documents are well-formed and
can be read by standard XML tools.
"""
