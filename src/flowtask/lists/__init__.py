"""
List subsystem.

Components:
- list_models.py: data structures (TaskList, ListDraft, ListPatch)
- list_service.py: async CRUD service over the in-memory list store
"""
