"""Command line interface for keystat."""
