"""Command-line interface for Filebind."""
