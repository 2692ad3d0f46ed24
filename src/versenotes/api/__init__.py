"""HTTP API for verse lookups."""
