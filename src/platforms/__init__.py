"""Per-platform configuration resolution."""
