"""Shared helpers: HTTP and logging."""
