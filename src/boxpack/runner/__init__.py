"""Command-line harness, run configuration and box list input."""
