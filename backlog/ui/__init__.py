"""Interactive terminal session for backlog."""
