"""Runtime value types for liswat: symbols, pairs, environments and procedures."""
