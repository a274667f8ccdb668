"""Shared SDK plumbing - settings and logging."""
