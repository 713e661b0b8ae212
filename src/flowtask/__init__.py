"""
FlowTask: task/list manager with in-memory mock services.

Packages:
- store: ordered entity store, simulated latency, seed datasets
- tasks / lists: entity models and CRUD services
- views: filtering, progress summary and the task form
- cli / connectors: composition root, slash commands and the console REPL
"""

__version__ = "0.1.0"
