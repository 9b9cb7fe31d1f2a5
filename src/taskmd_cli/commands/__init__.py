"""CLI commands for taskmd."""
