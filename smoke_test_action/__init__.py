"""Smoke tests for a deployed documentation site."""
