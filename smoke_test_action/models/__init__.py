"""Data structures shared across the smoke test suite."""
