"""Command-line interface and interactive session."""
