"""loclink - resolvable source-location links for plain-text notes."""
