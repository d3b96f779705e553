"""Command-line interface for rcat."""
