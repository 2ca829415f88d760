"""Shared helpers: filesystem access, logging and errors."""
