"""Subcommands of the fsmanager CLI."""
