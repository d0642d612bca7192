"""Domain layer for Taskboard.

Pure models and rules with no I/O:

- shared: Result type for explicit error handling
- task: Task records, validation predicates, filtering and ordering
"""
