"""
Personal task tracker.

Components:
- tasks/: Task entity + status, JSON file store, command operations
- cli/: command registry, bootstrap, entrypoint
- connectors/: interactive console menu loop
"""

__version__ = "0.1.0"
