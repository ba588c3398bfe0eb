"""Terminal user interface for flatcopy."""
