"""Test suite for Finport.

- unit/: Unit tests - domain aggregate, application handlers, ambient stack

All tests run in isolation with mocked collaborators (no I/O).
"""
