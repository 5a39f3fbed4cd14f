"""backlog - a per-repository task list with an interactive terminal mode."""

__version__ = "0.1.0"
