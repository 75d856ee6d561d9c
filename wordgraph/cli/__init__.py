"""Command-line surface and result presenters."""
