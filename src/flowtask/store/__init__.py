"""
Storage layer.

Components:
- entity_store.py: ordered in-memory store returning defensive copies
- latency.py: simulated I/O delay strategies (FixedLatency / NoLatency)
- seed.py: static Task/List datasets loaded once at startup
"""
