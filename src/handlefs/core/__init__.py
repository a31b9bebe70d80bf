"""Constants and error types for handlefs."""
