"""Command-line interface for awto."""
