"""Persistence interfaces and their SQLite implementations."""
