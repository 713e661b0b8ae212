"""Core contracts: errors, ports, shared field helpers and AppState."""
