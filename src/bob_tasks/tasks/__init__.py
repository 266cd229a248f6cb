"""
Task subsystem.

Components:
- task_models.py: data structures (Task, ToDo, Deadline, Event)
- task_codec.py: one task <-> one text line, plus the decode error types
- task_store.py: file-backed load / save / append
"""
