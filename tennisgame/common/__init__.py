"""Shared helpers used by adapters and the command line."""
