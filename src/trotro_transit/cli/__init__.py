"""Command-line interface for trotro route search."""
