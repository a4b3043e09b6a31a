"""Command-line commands for relfinder."""
