"""Command line interface for island counting."""
