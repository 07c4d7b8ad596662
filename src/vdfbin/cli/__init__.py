"""Command line interface for vdfbin."""
