"""Built-in morphology data."""
