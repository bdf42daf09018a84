"""Testing layer: golden script generation, comparison and CLI."""
