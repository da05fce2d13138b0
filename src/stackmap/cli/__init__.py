"""Command line interface for stackmap."""
