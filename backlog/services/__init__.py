"""Backlog services - storage, repository discovery and one-shot commands."""
