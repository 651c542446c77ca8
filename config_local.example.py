# config_local.example.py

"""
Example local overrides.

Usage:
  1) Copy this file to `config_local.py`
  2) Adjust values for your machine
  3) Never commit `config_local.py` (it is gitignored)

Prefer environment variables / `.env`. Only these names are read.
"""

# Example: keep tasks in your home directory
# TASKS_FILE = "~/.task_tracker/tasks.json"

# Example: show info logs in the console
# LOG_LEVEL = "INFO"
