"""Command-line interface for ExtrapFit."""
