"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority, TaskDraft, TaskPatch)
- task_service.py: async CRUD service over the in-memory task store
"""
