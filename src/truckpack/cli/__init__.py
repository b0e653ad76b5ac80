"""Command-line interface for pack analysis."""
