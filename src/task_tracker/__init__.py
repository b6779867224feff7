"""Interactive command-line task tracker (in-memory tasks, numbered menu)."""
