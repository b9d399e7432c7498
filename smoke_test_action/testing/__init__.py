"""Helpers for testing the smoke test suite."""
