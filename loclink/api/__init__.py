"""loclink API layer."""
