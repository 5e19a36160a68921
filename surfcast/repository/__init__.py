"""Repositories - external data sources."""
