"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskFilter) + stored-shape decode/encode
- task_ids.py: monotonic millisecond id source
- task_manager.py: in-memory list with write-through persistence and filtered views
"""
