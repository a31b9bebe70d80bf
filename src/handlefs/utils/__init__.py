"""Debug and logging helpers for handlefs."""
