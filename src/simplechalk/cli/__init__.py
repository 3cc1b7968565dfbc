"""Command line entry point for simplechalk."""
