"""Shared utilities for awto (logging, naming)."""
