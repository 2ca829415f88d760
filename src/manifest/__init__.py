"""Package manifest patching."""
