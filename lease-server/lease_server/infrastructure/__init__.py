"""Infrastructure adapters (database, external HTTP services)."""
