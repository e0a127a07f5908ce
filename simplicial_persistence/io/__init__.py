"""Reading weighted graphs from disk."""
