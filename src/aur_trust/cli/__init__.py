"""Command-line interface for aur-trust."""
