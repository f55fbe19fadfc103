"""Command line interface for the mydiff demo."""
