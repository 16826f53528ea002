"""Command-line interface for bufpack."""
