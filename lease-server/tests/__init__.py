"""Lease server test suite."""
