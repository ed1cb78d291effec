"""Command line entry points for essential_core."""
