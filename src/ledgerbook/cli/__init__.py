"""Command-line interface for ledgerbook."""
