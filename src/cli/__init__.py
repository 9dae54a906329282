"""Command-line front end for splitrun."""
