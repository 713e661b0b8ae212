"""
View composition.

Components:
- task_view.py: filtering, search, progress summary, sidebar counts, labels
- task_form.py: task form state and title validation
- actions.py: user actions over the services with user-facing messages
"""
