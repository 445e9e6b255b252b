"""Typer + Rich command line on top of the SDK."""
